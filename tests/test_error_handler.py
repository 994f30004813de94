"""
Tests for word_censor/error_handler.py

Tests exception-to-friendly-message mapping, the safe_operation decorator,
UserFriendlyError pass-through and input validation.
"""

import re

import pytest
import yaml

from word_censor.error_handler import (
    InvalidInputError,
    UserFriendlyError,
    get_friendly_message,
    handle_error,
    require_text,
    safe_operation,
)


# ---------------------------------------------------------------------------
# UserFriendlyError / InvalidInputError
# ---------------------------------------------------------------------------

class TestUserFriendlyError:
    def test_basic_creation(self):
        err = UserFriendlyError("Something broke")
        assert err.user_message == "Something broke"
        assert err.technical_message == "Something broke"

    def test_with_technical_message(self):
        err = UserFriendlyError("Oops", "KeyError at line 42")
        assert err.user_message == "Oops"
        assert str(err) == "KeyError at line 42"


class TestInvalidInputError:
    def test_is_type_error(self):
        err = InvalidInputError("Bad input")
        assert isinstance(err, TypeError)
        assert isinstance(err, UserFriendlyError)

    def test_require_text_passes_strings(self):
        assert require_text("") == ""
        assert require_text("abc") == "abc"

    def test_require_text_rejects_others(self):
        with pytest.raises(InvalidInputError) as exc_info:
            require_text(12, "sentence")
        assert "sentence" in str(exc_info.value)
        assert "int" in str(exc_info.value)


# ---------------------------------------------------------------------------
# get_friendly_message
# ---------------------------------------------------------------------------

class TestGetFriendlyMessageByType:
    def test_invalid_input(self):
        title, msg = get_friendly_message(InvalidInputError("Expected text"))
        assert title == "Invalid input"
        assert msg == "Expected text"

    def test_user_friendly_error(self):
        title, msg = get_friendly_message(UserFriendlyError("Nope"))
        assert msg == "Nope"

    def test_file_not_found(self):
        err = FileNotFoundError(2, "No such file", "words.txt")
        title, msg = get_friendly_message(err)
        assert "not found" in title.lower()
        assert "words.txt" in msg

    def test_permission_error(self):
        title, msg = get_friendly_message(PermissionError("denied"))
        assert "permission" in title.lower()

    def test_is_a_directory_error(self):
        title, msg = get_friendly_message(IsADirectoryError("dir"))
        assert "invalid" in title.lower()

    def test_regex_error(self):
        title, msg = get_friendly_message(re.error("unterminated character set"))
        assert "pattern" in title.lower()

    def test_os_error(self):
        title, msg = get_friendly_message(OSError("disk full"))
        assert "disk" in title.lower()


class TestGetFriendlyMessageByString:
    def test_yaml_keyword(self):
        title, msg = get_friendly_message(RuntimeError("yaml parsing failed"))
        assert "settings" in title.lower()

    def test_yaml_exception_module(self):
        title, msg = get_friendly_message(yaml.YAMLError("bad indentation"))
        assert "settings" in title.lower()

    def test_default_fallback(self):
        title, msg = get_friendly_message(RuntimeError("something totally unexpected"))
        assert title == "Something went wrong"
        assert "something totally unexpected" in msg
        assert "wordcensor.log" in msg


# ---------------------------------------------------------------------------
# handle_error
# ---------------------------------------------------------------------------

class TestHandleError:
    def test_returns_friendly_tuple(self):
        title, msg = handle_error(FileNotFoundError("words.txt"), "loading word list")
        assert isinstance(title, str)
        assert isinstance(msg, str)
        assert len(title) > 0

    def test_logs_error(self, caplog):
        with caplog.at_level("ERROR", logger="word_censor.error_handler"):
            handle_error(ValueError("boom"), "testing")
        assert "Error in testing: boom" in caplog.text


# ---------------------------------------------------------------------------
# safe_operation decorator
# ---------------------------------------------------------------------------

class TestSafeOperation:
    def test_normal_return_value(self):
        @safe_operation("test")
        def good_func():
            return 42
        assert good_func() == 42

    def test_wraps_generic_exception(self):
        @safe_operation("test")
        def bad_func():
            raise ValueError("something bad")
        with pytest.raises(UserFriendlyError) as exc_info:
            bad_func()
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert exc_info.value.technical_message == "something bad"

    def test_passes_through_user_friendly_error(self):
        @safe_operation("test")
        def already_friendly():
            raise InvalidInputError("Already friendly", "technical detail")
        with pytest.raises(InvalidInputError) as exc_info:
            already_friendly()
        assert exc_info.value.user_message == "Already friendly"

    def test_decorated_function_metadata_preserved(self):
        @safe_operation("test")
        def my_function():
            """My docstring."""
            pass
        assert my_function.__name__ == "my_function"
        assert my_function.__doc__ == "My docstring."
