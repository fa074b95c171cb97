from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def cli_environment() -> dict[str, str]:
    """Environment that imports the checkout and keeps output uncoloured."""
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(
        entry for entry in (str(PROJECT_ROOT), env.get("PYTHONPATH")) if entry
    )
    env["NO_COLOR"] = "1"
    return env


def run_juniper_config(config_text: str, command: list[str]) -> str:
    """Pipe configuration text through ``python -m juniper_config``.

    Returns stdout unchanged, so formatted configuration keeps its trailing
    newline. A non-zero exit status raises ``RuntimeError`` carrying the
    ``error: ...`` line the command printed on stderr.
    """
    result = subprocess.run(
        [sys.executable, "-m", "juniper_config", *command],
        input=config_text,
        text=True,
        capture_output=True,
        cwd=PROJECT_ROOT,
        check=False,
        env=cli_environment(),
    )
    if result.returncode != 0:
        details = result.stderr.strip() or f"exit code {result.returncode}"
        raise RuntimeError(f"juniper-config {' '.join(command)} failed: {details}")
    return result.stdout
