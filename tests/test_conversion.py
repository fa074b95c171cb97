import json

import pytest

from juniper_config.conversion import from_python, to_python
from juniper_config.parser import parse
from juniper_config.serializer import serialize
from juniper_config.values import Block, Scalar, ScalarList

SOURCE = """
system {
  host-name edge-01;
  services {
    ssh;
  }
}
interfaces {
  ge-0/0/0 {
    unit 0;
  }
}
member a;
member b;
""".lstrip("\n")


def test_to_python_nested():
    assert to_python(parse(SOURCE)) == {
        "system": {"host-name": "edge-01", "services": {"ssh": ""}},
        "interfaces": {"ge-0/0/0": {"unit": "0"}},
        "member": ["a", "b"],
    }


def test_to_python_preserves_order():
    assert list(to_python(parse(SOURCE))) == ["system", "interfaces", "member"]


def test_from_python_builds_values():
    assert from_python({"a": "1", "b": ["x", "y"], "c": {}}) == Block(
        {"a": Scalar("1"), "b": ScalarList(("x", "y")), "c": Block()}
    )


def test_json_round_trip():
    """Trees survive export to JSON and back to configuration text."""
    tree = parse(SOURCE)
    restored = from_python(json.loads(json.dumps(to_python(tree))))
    assert restored == tree
    assert serialize(restored) == SOURCE


@pytest.mark.parametrize(
    "data",
    [
        42,
        None,
        {"a": 1},
        {"a": ["x", 2]},
        {1: "x"},
    ],
)
def test_from_python_rejects_unsupported(data):
    with pytest.raises(TypeError):
        from_python(data)


def test_to_python_rejects_plain_data():
    with pytest.raises(TypeError):
        to_python("not a value")  # type: ignore[arg-type]
