from input_guard.domain.enums import ValueCategory, category_of
from input_guard.domain.errors import (
    EmptyValueError,
    InputTooLongError,
    InputValidationError,
    TypeMismatchError,
)
from input_guard.domain.structure import (
    ArrayShape,
    ObjectShape,
    PrimitiveShape,
    Shape,
    StructureMismatch,
    UnknownShape,
    parse_shape,
    validate_by_structure,
)
from input_guard.domain.type_guard import TypeDescriptor, describe_type, validate_type
from input_guard.domain.validators import (
    is_null,
    validate_email,
    validate_non_empty_fields,
    validate_password,
    validate_url,
    validate_user_name,
)

__all__ = [
    "ArrayShape",
    "EmptyValueError",
    "InputTooLongError",
    "InputValidationError",
    "ObjectShape",
    "PrimitiveShape",
    "Shape",
    "StructureMismatch",
    "TypeDescriptor",
    "TypeMismatchError",
    "UnknownShape",
    "ValueCategory",
    "category_of",
    "describe_type",
    "is_null",
    "parse_shape",
    "validate_by_structure",
    "validate_email",
    "validate_non_empty_fields",
    "validate_password",
    "validate_type",
    "validate_url",
    "validate_user_name",
]
