import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from input_guard.domain.enums import ValueCategory, category_of, is_array
from input_guard.domain.errors import TypeMismatchError

_NUMERIC_WRAPPERS = (float, numbers.Number, numbers.Real)


@dataclass(frozen=True, slots=True)
class NullType:
    """Descriptor `None`: only `None` satisfies it."""


@dataclass(frozen=True, slots=True)
class PlainObjectType:
    """Descriptor `dict`/`Mapping`: any mapping or plain object instance."""


@dataclass(frozen=True, slots=True)
class ArrayType:
    """Descriptor `list`/`tuple`: any list or tuple."""


@dataclass(frozen=True, slots=True)
class NominalType:
    """Any other class, matched with `isinstance` plus the wrapper shortcuts."""

    cls: type


@dataclass(frozen=True, slots=True)
class SampleType:
    """A non-class value used as a type tag, matched by value category."""

    sample: Any


TypeDescriptor = NullType | PlainObjectType | ArrayType | NominalType | SampleType


def describe_type(descriptor: Any) -> TypeDescriptor:
    """Resolve a raw `validate_type` argument into a `TypeDescriptor` variant."""
    if isinstance(descriptor, (NullType, PlainObjectType, ArrayType, NominalType, SampleType)):
        return descriptor
    if descriptor is None:
        return NullType()
    if descriptor is dict or descriptor is Mapping:
        return PlainObjectType()
    if descriptor is list or descriptor is tuple:
        return ArrayType()
    if isinstance(descriptor, type):
        return NominalType(cls=descriptor)
    return SampleType(sample=descriptor)


def validate_type(type_descriptor: Any, value: Any) -> None:
    """Raise `TypeMismatchError` unless `value` satisfies `type_descriptor`.

    Accepted descriptors: `None`, `dict` (plain object), `list` (array), any
    class, or a sample value whose category must match the value's category.

    Example:
        ```python
        validate_type(str, "hello")
        validate_type(dict, {"key": "value"})
        validate_type(0, 12.5)  # both are numbers
        ```
    """
    descriptor = describe_type(type_descriptor)
    if _matches(descriptor, value):
        return
    raise TypeMismatchError(
        f"Type of {_descriptor_name(type_descriptor)} does not match {category_of(value)}"
    )


def _matches(descriptor: TypeDescriptor, value: Any) -> bool:
    if isinstance(descriptor, NullType):
        return value is None
    if value is None:
        return False
    if isinstance(descriptor, PlainObjectType):
        return _is_plain_object(value)
    if isinstance(descriptor, ArrayType):
        return is_array(value)
    if isinstance(descriptor, NominalType):
        return _matches_nominal(descriptor.cls, value)
    if isinstance(descriptor, SampleType):
        sample = descriptor.sample
        if category_of(sample) == category_of(value):
            return True
        return is_array(sample) and is_array(value)
    return False


def _matches_nominal(cls: type, value: Any) -> bool:
    if cls is bool:
        return isinstance(value, bool)
    if cls is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if cls in _NUMERIC_WRAPPERS:
        return category_of(value) == ValueCategory.NUMBER
    if cls is str:
        return isinstance(value, str)
    return isinstance(value, cls)


def _is_plain_object(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    if is_array(value):
        return False
    return category_of(value) == ValueCategory.OBJECT


def _descriptor_name(descriptor: Any) -> str:
    if isinstance(descriptor, type):
        return descriptor.__name__
    return repr(descriptor)
