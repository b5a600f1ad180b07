"""Unit tests for primkit errors."""

from primkit import errors


class TestInvalidArgumentError:
    """Tests for the InvalidArgumentError error."""

    @staticmethod
    def test_attributes() -> None:
        """Test that the error keeps the argument name, value and reason."""
        error = errors.InvalidArgumentError("size", 0, "must be positive")
        assert error.argument == "size"
        assert error.value == 0
        assert error.reason == "must be positive"

    @staticmethod
    def test_error_message() -> None:
        """Test that the error message is formatted correctly."""
        error = errors.InvalidArgumentError("n", 2.5, "expected an integral number")
        expected_message = "Invalid value for 'n': 2.5 (expected an integral number)"
        assert str(error) == expected_message

    @staticmethod
    def test_hierarchy() -> None:
        """Test that the error is both a PrimkitError and a ValueError."""
        error = errors.InvalidArgumentError("size", -1, "must be positive")
        assert isinstance(error, errors.PrimkitError)
        assert isinstance(error, ValueError)


class TestInvalidLogLevelError:
    """Tests for the InvalidLogLevelError error."""

    @staticmethod
    def test_attributes() -> None:
        """Test that the error keeps the offending level name."""
        error = errors.InvalidLogLevelError("LOUD")
        assert error.level == "LOUD"
        assert isinstance(error, errors.PrimkitError)

    @staticmethod
    def test_error_message() -> None:
        """Test that the error message is formatted correctly."""
        assert str(errors.InvalidLogLevelError("LOUD")) == "Invalid log level: LOUD"
