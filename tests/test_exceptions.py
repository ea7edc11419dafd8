"""Tests for custom exceptions."""

from boxtree.exceptions import BoxtreeError, ConfigError, PathError, SubtreeReadError


class TestPathError:
    """Test PathError exception."""

    def test_path_error_message(self):
        error = PathError("missing", "does not exist")
        assert str(error) == "Directory 'missing' does not exist"

    def test_path_error_attributes(self):
        error = PathError("some/file.txt", "is not a directory")
        assert error.path == "some/file.txt"
        assert error.reason == "is not a directory"
        assert isinstance(error, BoxtreeError)


class TestSubtreeReadError:
    """Test SubtreeReadError exception."""

    def test_message_uses_strerror(self):
        cause = PermissionError(13, "Permission denied")
        error = SubtreeReadError("src/private", cause)
        assert str(error) == "Cannot open directory src/private: Permission denied"
        assert error.path == "src/private"
        assert error.cause is cause

    def test_message_without_strerror(self):
        error = SubtreeReadError("src", OSError("device went away"))
        assert str(error) == "Cannot open directory src: device went away"

    def test_message_without_cause(self):
        error = SubtreeReadError("src")
        assert str(error) == "Cannot open directory src: unknown error"
        assert error.cause is None


def test_config_error():
    error = ConfigError("Invalid level 0, must be greater than 0")
    assert str(error) == "Invalid level 0, must be greater than 0"
    assert isinstance(error, BoxtreeError)
