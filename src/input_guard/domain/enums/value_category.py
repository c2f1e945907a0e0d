import numbers
from collections.abc import Mapping
from enum import StrEnum
from typing import Any


class ValueCategory(StrEnum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    FUNCTION = "function"
    NULL = "null"


def category_of(value: Any) -> ValueCategory:
    """Return the runtime primitive category of `value`.

    `bool` is checked before numbers because it subclasses `int`.
    Lists, tuples, mappings and class instances all fall into `object`.
    """
    if value is None:
        return ValueCategory.NULL
    if isinstance(value, bool):
        return ValueCategory.BOOLEAN
    if isinstance(value, str):
        return ValueCategory.STRING
    if isinstance(value, numbers.Number):
        return ValueCategory.NUMBER
    if isinstance(value, (Mapping, list, tuple)):
        return ValueCategory.OBJECT
    if callable(value):
        return ValueCategory.FUNCTION
    return ValueCategory.OBJECT


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))
