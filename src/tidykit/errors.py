"""Error definitions for tidykit."""

# ============================================================================
#                           General errors
# ============================================================================


class TidykitError(Exception):
    """Base class for tidykit errors."""


class InvalidArgumentTypeError(TidykitError, TypeError):
    """Raised when an argument is not of the kind a helper requires."""

    def __init__(self, argument: str, expected: str, actual: object) -> None:
        actual_name = type(actual).__name__
        super().__init__(f"'{argument}' must be {expected}, got {actual_name}.")
        self.argument = argument
        self.expected = expected
        self.actual = actual_name


# ============================================================================
#                   String replacement errors
# ============================================================================


class PatternSyntaxError(TidykitError, ValueError):
    """Raised when unescaped replacement keys do not form a valid pattern."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid search pattern {pattern!r}: {reason}.")
        self.pattern = pattern
        self.reason = reason


# ============================================================================
#                   CLI input errors
# ============================================================================


class InvalidDocumentError(TidykitError):
    """Raised when a JSON input document cannot be parsed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Could not read JSON from {source}: {reason}")
        self.source = source
        self.reason = reason
