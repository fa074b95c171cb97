class JuniperConfigError(Exception):
    """Base class for every error raised by juniper_config."""

    pass


class JuniperSyntaxError(JuniperConfigError, SyntaxError):
    """Raised in strict mode when the configuration text is malformed."""

    def __init__(self, message: str, lineno: int | None = None) -> None:
        # SyntaxError.__str__ appends "(line N)" once lineno is set.
        super().__init__(message)
        self.lineno = lineno


class UnbalancedBracesError(JuniperSyntaxError):
    pass


class DuplicateKeyError(JuniperConfigError):
    """Raised when a key recurs with incompatible value kinds."""

    def __init__(self, key: str, existing: str, new: str) -> None:
        super().__init__(
            f"Key {key!r} defined as {existing} and redefined as {new}"
        )
        self.key = key


class NestingTooDeepError(JuniperConfigError):
    """Raised when nesting exceeds the configured limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Maximum nesting depth of {limit} exceeded")
        self.limit = limit
