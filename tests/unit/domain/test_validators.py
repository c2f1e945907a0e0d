import logging
import re

import pytest

from input_guard.domain import (
    EmptyValueError,
    InputValidationError,
    TypeMismatchError,
    is_null,
    validate_by_structure,
    validate_email,
    validate_non_empty_fields,
    validate_password,
    validate_type,
    validate_url,
    validate_user_name,
)
from input_guard.domain.validators import PASSWORD_STRENGTH_MESSAGE
from input_guard.shared.security import is_js_script, is_sql_injection


class _Empty:
    pass


class _Named:
    def __init__(self) -> None:
        self.name = "Ana"


def test_validate_email_accepts_valid_address() -> None:
    validate_email("test@example.com")


def test_validate_email_rejects_bad_format() -> None:
    with pytest.raises(InputValidationError, match="Email must be a valid email address."):
        validate_email("invalidemail.com")


def test_validate_email_rejects_short_address() -> None:
    with pytest.raises(InputValidationError, match="Email must be at least 5 characters long."):
        validate_email("a@b", 5)


def test_validate_email_rejects_long_address() -> None:
    with pytest.raises(InputValidationError, match="Email must not exceed 64 characters."):
        validate_email("a" * 65 + "@example.com")


def test_validate_email_respects_custom_bounds() -> None:
    validate_email("a@b.co", 3, 10)

    with pytest.raises(InputValidationError, match="must not exceed 10"):
        validate_email("ana@example.com", 3, 10)


def test_validate_password_accepts_strong_password() -> None:
    validate_password("Password1!")


def test_validate_password_requires_special_character() -> None:
    with pytest.raises(InputValidationError, match=re.escape(PASSWORD_STRENGTH_MESSAGE)):
        validate_password("Password123")


def test_validate_password_rejects_characters_outside_allowed_set() -> None:
    with pytest.raises(InputValidationError, match=re.escape(PASSWORD_STRENGTH_MESSAGE)):
        validate_password("Password 1!")


def test_validate_password_length_bounds() -> None:
    with pytest.raises(InputValidationError, match="Password must be at least 8 characters long."):
        validate_password("Pass1!")
    with pytest.raises(InputValidationError, match="Password must not exceed 128 characters."):
        validate_password("P" * 129 + "1!")


def test_validate_password_custom_minimum_below_default() -> None:
    validate_password("Ab1!ab", min_length=6)


def test_validate_user_name_accepts_alphanumeric() -> None:
    validate_user_name("user123")
    validate_user_name("u" * 32)


def test_validate_user_name_rejects_symbols() -> None:
    with pytest.raises(InputValidationError, match="Username must contain only letters and numbers."):
        validate_user_name("user@123")


def test_validate_user_name_length_bounds() -> None:
    with pytest.raises(InputValidationError, match="Username must be at least 5 characters long."):
        validate_user_name("usr")
    with pytest.raises(InputValidationError, match="Username must not exceed 32 characters."):
        validate_user_name("u" * 33)


def test_validate_url_accepts_common_forms() -> None:
    validate_url("https://example.com")
    validate_url("http://sub.example.co.uk/path/to-page")
    validate_url("example.com/search?q=1&page=2#top")


def test_validate_url_rejects_malformed() -> None:
    with pytest.raises(InputValidationError, match="Invalid URL."):
        validate_url("invalid-url")


def test_validate_url_rejects_too_long() -> None:
    with pytest.raises(
        InputValidationError,
        match="URL exceeds the maximum length of 2048 characters.",
    ):
        validate_url("https://" + "a" * 2050 + ".com")


def test_validate_url_checks_allowed_domains_only_when_given() -> None:
    validate_url("https://api.example.com/v1", allowed_domains=["example.com"])
    validate_url("example.com/path", allowed_domains=["example.com"])
    validate_url("https://evil.com")

    with pytest.raises(
        InputValidationError,
        match=re.escape("URL must belong to one of the allowed domains: example.com, example.org."),
    ):
        validate_url("https://evil.com", allowed_domains=["example.com", "example.org"])


def test_validate_non_empty_fields_reports_key_and_depth() -> None:
    with pytest.raises(EmptyValueError, match='Field "name" cannot be null or empty at depth 0.'):
        validate_non_empty_fields({"name": ""})
    with pytest.raises(EmptyValueError, match='Field "city" cannot be null or empty at depth 1.'):
        validate_non_empty_fields({"address": {"city": None}})


def test_validate_non_empty_fields_checks_list_items() -> None:
    with pytest.raises(EmptyValueError, match="Value cannot be null or empty at depth 1."):
        validate_non_empty_fields([{"a": "x"}, None])


def test_validate_non_empty_fields_accepts_zero_and_false() -> None:
    validate_non_empty_fields({"count": 0, "enabled": False, "tags": ["a"], "meta": {}})


def test_validate_non_empty_fields_ignores_fields_beyond_depth() -> None:
    data = {"a": {"b": {"c": {"d": ""}}}}

    validate_non_empty_fields(data, max_depth=3)
    with pytest.raises(EmptyValueError, match='Field "d" cannot be null or empty at depth 3.'):
        validate_non_empty_fields(data, max_depth=4)


@pytest.mark.parametrize("value", [None, "", float("nan")])
def test_is_null_rejects_null_like_values(value) -> None:
    with pytest.raises(EmptyValueError, match="Value is null or falsy"):
        is_null(value)


def test_is_null_rejects_empty_containers() -> None:
    with pytest.raises(EmptyValueError, match="Value is an empty array"):
        is_null([])
    with pytest.raises(EmptyValueError, match="Value is an empty object"):
        is_null({})
    with pytest.raises(EmptyValueError, match="Value is an empty class instance"):
        is_null(_Empty())


@pytest.mark.parametrize("value", [True, False, len, b"raw"])
def test_is_null_rejects_unsupported_types(value) -> None:
    with pytest.raises(EmptyValueError, match="Invalid value type"):
        is_null(value)


@pytest.mark.parametrize("value", [0, 1.5, "text", [0], ("a",), {"a": None}, _Named()])
def test_is_null_accepts_present_values(value) -> None:
    is_null(value)


def test_core_functions_write_nothing_and_emit_no_log_records(
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.DEBUG)

    validate_email("test@example.com")
    with pytest.raises(InputValidationError):
        validate_email("a@b")
    validate_user_name("ana2026")
    with pytest.raises(InputValidationError):
        validate_user_name("ana!")
    validate_password("Password1!")
    with pytest.raises(InputValidationError):
        validate_password("Password123")
    validate_url("https://example.com")
    with pytest.raises(InputValidationError):
        validate_url("not a url")
    validate_non_empty_fields({"name": "Ana"})
    with pytest.raises(EmptyValueError):
        validate_non_empty_fields({"name": ""})
    is_null("value")
    with pytest.raises(EmptyValueError):
        is_null(None)
    validate_type(str, "text")
    with pytest.raises(TypeMismatchError):
        validate_type(str, 1)
    assert validate_by_structure({"name": "string"}, {}) is not None
    is_sql_injection("1; DROP TABLE users --")
    is_js_script("<script>alert('x')</script>")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
    assert caplog.records == []
