"""Input validation and best-effort sanitization toolkit."""

from input_guard.domain import (
    EmptyValueError,
    InputTooLongError,
    InputValidationError,
    StructureMismatch,
    TypeMismatchError,
    ValueCategory,
    is_null,
    parse_shape,
    validate_by_structure,
    validate_email,
    validate_non_empty_fields,
    validate_password,
    validate_type,
    validate_url,
    validate_user_name,
)
from input_guard.shared.security import (
    SanitizerPass,
    is_js_script,
    is_sql_injection,
    sanitize_payload,
)

__all__ = [
    "EmptyValueError",
    "InputTooLongError",
    "InputValidationError",
    "SanitizerPass",
    "StructureMismatch",
    "TypeMismatchError",
    "ValueCategory",
    "is_js_script",
    "is_null",
    "is_sql_injection",
    "parse_shape",
    "sanitize_payload",
    "validate_by_structure",
    "validate_email",
    "validate_non_empty_fields",
    "validate_password",
    "validate_type",
    "validate_url",
    "validate_user_name",
]
