import pytest

from input_guard.domain import InputValidationError, TypeMismatchError, describe_type, validate_type
from input_guard.domain.type_guard import (
    ArrayType,
    NominalType,
    NullType,
    PlainObjectType,
    SampleType,
)


class Animal:
    pass


class Dog(Animal):
    def __init__(self) -> None:
        self.name = "Rex"


def test_validate_type_accepts_primitive_wrappers() -> None:
    validate_type(str, "Hello")
    validate_type(int, 123)
    validate_type(float, 1)
    validate_type(float, 2.5)
    validate_type(bool, False)


def test_validate_type_rejects_mismatched_primitive() -> None:
    with pytest.raises(TypeMismatchError, match="Type of str does not match number"):
        validate_type(str, 123)


def test_booleans_are_not_numbers() -> None:
    with pytest.raises(TypeMismatchError):
        validate_type(int, True)
    with pytest.raises(TypeMismatchError):
        validate_type(float, False)


def test_plain_object_and_array_markers() -> None:
    validate_type(dict, {"key": "value"})
    validate_type(dict, Dog())
    validate_type(list, [1, 2])
    validate_type(list, (1, 2))

    with pytest.raises(TypeMismatchError):
        validate_type(list, "test")
    with pytest.raises(TypeMismatchError):
        validate_type(list, {"key": "value"})
    with pytest.raises(TypeMismatchError):
        validate_type(dict, [1])
    with pytest.raises(TypeMismatchError):
        validate_type(dict, "text")


def test_null_descriptor_requires_both_null() -> None:
    validate_type(None, None)

    with pytest.raises(TypeMismatchError, match="does not match number"):
        validate_type(None, 0)
    with pytest.raises(TypeMismatchError, match="does not match null"):
        validate_type(str, None)


def test_nominal_classes_use_isinstance() -> None:
    validate_type(Animal, Dog())

    with pytest.raises(TypeMismatchError, match="Type of Dog does not match object"):
        validate_type(Dog, Animal())


def test_sample_values_match_by_category() -> None:
    validate_type("", "abc")
    validate_type(0, 3.5)
    validate_type([], [1])

    with pytest.raises(TypeMismatchError, match="Type of '' does not match number"):
        validate_type("", 1)


def test_type_mismatch_is_a_type_and_validation_error() -> None:
    with pytest.raises(TypeMismatchError) as exc_info:
        validate_type(bool, "yes")

    assert isinstance(exc_info.value, TypeError)
    assert isinstance(exc_info.value, InputValidationError)


def test_describe_type_resolves_every_variant() -> None:
    assert describe_type(None) == NullType()
    assert describe_type(dict) == PlainObjectType()
    assert describe_type(list) == ArrayType()
    assert describe_type(Dog) == NominalType(Dog)
    assert describe_type("x") == SampleType("x")
