import math
import re
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import urlsplit

from input_guard.domain.enums import ValueCategory, category_of, is_array
from input_guard.domain.errors import EmptyValueError, InputValidationError

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_USER_NAME_PATTERN = re.compile(r"[a-zA-Z0-9]+")
_PASSWORD_PATTERN = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]+")
_URL_PATTERN = re.compile(
    r"(https?://)?([a-zA-Z0-9-]+\.)+[a-zA-Z]{2,6}(/[a-zA-Z0-9-]*)*(\?[a-zA-Z0-9=&]*)?(#[a-zA-Z0-9_-]*)?"
)

PASSWORD_STRENGTH_MESSAGE = (
    "Password must contain at least one lowercase letter, one uppercase letter, "
    "one number, and one special character."
)


def validate_email(email: str, min_length: int = 5, max_length: int = 64) -> None:
    """Validate email length bounds and `local@domain.tld` shape."""
    if len(email) < min_length:
        raise InputValidationError(f"Email must be at least {min_length} characters long.")
    if len(email) > max_length:
        raise InputValidationError(f"Email must not exceed {max_length} characters.")
    if not _EMAIL_PATTERN.fullmatch(email):
        raise InputValidationError("Email must be a valid email address.")


def validate_user_name(user_name: str, min_length: int = 5, max_length: int = 32) -> None:
    """Validate that a username is ASCII alphanumeric and within bounds."""
    if not _USER_NAME_PATTERN.fullmatch(user_name):
        raise InputValidationError("Username must contain only letters and numbers.")
    if len(user_name) < min_length:
        raise InputValidationError(f"Username must be at least {min_length} characters long.")
    if len(user_name) > max_length:
        raise InputValidationError(f"Username must not exceed {max_length} characters.")


def validate_password(password: str, min_length: int = 8, max_length: int = 128) -> None:
    """Validate password length and character-class strength.

    A valid password has at least one lowercase letter, one uppercase letter,
    one digit and one of `@$!%*?&`, and no characters outside those classes.
    """
    if len(password) < min_length:
        raise InputValidationError(f"Password must be at least {min_length} characters long.")
    if len(password) > max_length:
        raise InputValidationError(f"Password must not exceed {max_length} characters.")
    if not _PASSWORD_PATTERN.fullmatch(password):
        raise InputValidationError(PASSWORD_STRENGTH_MESSAGE)


def validate_url(url: str, max_length: int = 2048, allowed_domains: Iterable[str] = ()) -> None:
    """Validate URL format, length and, when given, the host allow-list.

    The scheme is optional; hosts are matched with `str.endswith`, so
    `api.example.com` belongs to `example.com`.

    Example:
        ```python
        validate_url("https://api.example.com/v1", allowed_domains=["example.com"])
        ```
    """
    if not _URL_PATTERN.fullmatch(url):
        raise InputValidationError("Invalid URL.")
    if len(url) > max_length:
        raise InputValidationError(f"URL exceeds the maximum length of {max_length} characters.")

    domains = list(allowed_domains)
    if domains:
        host = _extract_host(url)
        if not any(host.endswith(domain) for domain in domains):
            raise InputValidationError(
                f"URL must belong to one of the allowed domains: {', '.join(domains)}."
            )


def validate_non_empty_fields(data: Any, max_depth: int = 10, current_depth: int = 0) -> None:
    """Raise on the first `None` or empty-string field within `max_depth` levels.

    Mappings report the offending key; list items and scalars are checked as
    bare values. Nothing at `current_depth >= max_depth` is inspected.
    """
    if current_depth >= max_depth:
        return
    if is_array(data):
        for item in data:
            validate_non_empty_fields(item, max_depth, current_depth + 1)
    elif isinstance(data, Mapping):
        for key, value in data.items():
            if _is_blank(value):
                raise EmptyValueError(
                    f'Field "{key}" cannot be null or empty at depth {current_depth}.'
                )
            if isinstance(value, Mapping) or is_array(value):
                validate_non_empty_fields(value, max_depth, current_depth + 1)
    elif _is_blank(data):
        raise EmptyValueError(f"Value cannot be null or empty at depth {current_depth}.")


def is_null(value: Any) -> None:
    """Raise `EmptyValueError` when `value` is null, empty, or of an unsupported type.

    Strings, numbers (zero included), non-empty collections and object
    instances with attributes pass. Booleans and callables are rejected as
    invalid types.
    """
    if _is_blank(value) or _is_nan(value):
        raise EmptyValueError("Value is null or falsy")

    category = category_of(value)
    if category in (ValueCategory.STRING, ValueCategory.NUMBER):
        return
    if category != ValueCategory.OBJECT:
        raise EmptyValueError("Invalid value type")

    if is_array(value) or isinstance(value, (set, frozenset)):
        if len(value) == 0:
            raise EmptyValueError("Value is an empty array")
        return
    if isinstance(value, Mapping):
        if len(value) == 0:
            raise EmptyValueError("Value is an empty object")
        return
    if hasattr(value, "__dict__"):
        if not vars(value):
            raise EmptyValueError("Value is an empty class instance")
        return
    raise EmptyValueError("Invalid value type")


def _extract_host(url: str) -> str:
    if "://" not in url:
        url = f"http://{url}"
    return urlsplit(url).hostname or ""


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)
