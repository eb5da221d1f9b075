"""Unit tests for tidykit errors."""

from tidykit import errors


class TestInvalidArgumentTypeError:
    """Tests for the InvalidArgumentTypeError error."""

    @staticmethod
    def test_attributes() -> None:
        """Test that the error records the argument, expectation and actual type."""
        error = errors.InvalidArgumentTypeError("text", "a string", 42)
        assert error.argument == "text"
        assert error.expected == "a string"
        assert error.actual == "int"

    @staticmethod
    def test_error_message() -> None:
        """Test that the error message is formatted correctly."""
        error = errors.InvalidArgumentTypeError("text", "a string", None)
        assert str(error) == "'text' must be a string, got NoneType."

    @staticmethod
    def test_is_type_error() -> None:
        """Test that the error is both a TidykitError and a TypeError."""
        error = errors.InvalidArgumentTypeError("text", "a string", 1)
        assert isinstance(error, errors.TidykitError)
        assert isinstance(error, TypeError)


class TestPatternSyntaxError:
    """Tests for the PatternSyntaxError error."""

    @staticmethod
    def test_attributes() -> None:
        """Test that the error records the pattern and the reason."""
        error = errors.PatternSyntaxError("+", "nothing to repeat at position 0")
        assert error.pattern == "+"
        assert error.reason == "nothing to repeat at position 0"

    @staticmethod
    def test_error_message() -> None:
        """Test that the error message is formatted correctly."""
        error = errors.PatternSyntaxError("a|+", "nothing to repeat")
        assert str(error) == "Invalid search pattern 'a|+': nothing to repeat."

    @staticmethod
    def test_is_value_error() -> None:
        """Test that the error is both a TidykitError and a ValueError."""
        error = errors.PatternSyntaxError("+", "bad")
        assert isinstance(error, errors.TidykitError)
        assert isinstance(error, ValueError)


class TestInvalidDocumentError:
    """Tests for the InvalidDocumentError error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """Test that the error records its source and reason."""
        error = errors.InvalidDocumentError("<stdin>", "Expecting value")
        assert error.source == "<stdin>"
        assert error.reason == "Expecting value"
        assert str(error) == "Could not read JSON from <stdin>: Expecting value"
