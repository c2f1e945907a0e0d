from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from input_guard.domain.enums import ValueCategory, category_of, is_array

_PRIMITIVE_TAGS = frozenset(category.value for category in ValueCategory)


@dataclass(frozen=True, slots=True)
class PrimitiveShape:
    type_name: ValueCategory

    def to_descriptor(self) -> str:
        return self.type_name.value


@dataclass(frozen=True, slots=True)
class ArrayShape:
    element_shapes: tuple["Shape", ...]

    def to_descriptor(self) -> list[Any]:
        return [shape.to_descriptor() for shape in self.element_shapes]


@dataclass(frozen=True, slots=True)
class ObjectShape:
    fields: tuple[tuple[str, "Shape"], ...]

    def to_descriptor(self) -> dict[str, Any]:
        return {name: shape.to_descriptor() for name, shape in self.fields}


@dataclass(frozen=True, slots=True)
class UnknownShape:
    raw: Any

    def to_descriptor(self) -> Any:
        return self.raw


Shape = PrimitiveShape | ArrayShape | ObjectShape | UnknownShape


@dataclass(frozen=True, slots=True)
class StructureMismatch:
    """First violation found while matching a subject against a shape."""

    path: str
    message: str
    expected: Any = None
    actual: ValueCategory | None = None
    key: str | None = None

    def __str__(self) -> str:
        return self.message


def parse_shape(raw: Any) -> Shape:
    """Convert a raw shape descriptor into its `Shape` variant.

    Example:
        ```python
        shape = parse_shape({"name": "string", "tags": ["string"]})
        ```
    """
    if isinstance(raw, (PrimitiveShape, ArrayShape, ObjectShape, UnknownShape)):
        return raw
    if isinstance(raw, str):
        if raw in _PRIMITIVE_TAGS:
            return PrimitiveShape(type_name=ValueCategory(raw))
        return UnknownShape(raw=raw)
    if is_array(raw):
        return ArrayShape(element_shapes=tuple(parse_shape(item) for item in raw))
    if isinstance(raw, Mapping):
        return ObjectShape(fields=tuple((key, parse_shape(value)) for key, value in raw.items()))
    return UnknownShape(raw=raw)


def validate_by_structure(shape: Any, subject: Any, path: str = "") -> StructureMismatch | None:
    """Match `subject` against `shape` and return the first mismatch, if any.

    Traversal is depth-first in declaration order and stops at the first
    failure. Extra subject fields are ignored. Mismatches are returned, never
    raised.

    Example:
        ```python
        error = validate_by_structure({"name": "string", "age": "number"}, {"name": "Ana"})
        assert error.message == 'Missing key "age" at path ""'
        ```
    """
    node = parse_shape(shape)

    if isinstance(node, PrimitiveShape):
        actual = category_of(subject)
        if actual != node.type_name:
            return StructureMismatch(
                path=path,
                message=f'Expected type {node.type_name} at path "{path}", but got {actual}',
                expected=node.to_descriptor(),
                actual=actual,
            )
        return None

    if isinstance(node, ArrayShape):
        if not is_array(subject):
            return StructureMismatch(
                path=path,
                message=f'Expected an array at path "{path}", but got {category_of(subject)}',
                expected=node.to_descriptor(),
                actual=category_of(subject),
            )
        # Every element is checked against every declared element shape.
        for element_shape in node.element_shapes:
            for index, item in enumerate(subject):
                error = validate_by_structure(element_shape, item, f"{path}[{index}]")
                if error is not None:
                    return error
        return None

    if isinstance(node, ObjectShape):
        if not _is_object_subject(subject):
            return StructureMismatch(
                path=path,
                message=f'Expected an object at path "{path}", but got {category_of(subject)}',
                expected=node.to_descriptor(),
                actual=category_of(subject),
            )
        for name, field_shape in node.fields:
            found, value = _lookup_field(subject, name)
            if not found:
                return StructureMismatch(
                    path=path,
                    message=f'Missing key "{name}" at path "{path}"',
                    expected=field_shape.to_descriptor(),
                    key=name,
                )
            error = validate_by_structure(field_shape, value, f"{path}.{name}")
            if error is not None:
                return error
        return None

    return StructureMismatch(
        path=path,
        message=f'Unknown structure type at path "{path}"',
        expected=node.to_descriptor(),
        actual=category_of(subject),
    )


def _is_object_subject(subject: Any) -> bool:
    return category_of(subject) == ValueCategory.OBJECT


def _lookup_field(subject: Any, name: Any) -> tuple[bool, Any]:
    """Find `name` among the subject's own fields: keys, indexes or instance attributes."""
    if isinstance(subject, Mapping):
        if name in subject:
            return True, subject[name]
        return False, None
    if is_array(subject):
        index = _as_index(name)
        if index is not None and index < len(subject):
            return True, subject[index]
        return False, None
    attributes = _own_attributes(subject)
    if name in attributes:
        return True, attributes[name]
    return False, None


def _as_index(name: Any) -> int | None:
    if isinstance(name, int) and not isinstance(name, bool):
        return name if name >= 0 else None
    # "01" or "+1" are not indexes.
    if isinstance(name, str) and name.isascii() and name.isdigit() and str(int(name)) == name:
        return int(name)
    return None


def _own_attributes(subject: Any) -> dict[str, Any]:
    attributes = dict(vars(subject)) if hasattr(subject, "__dict__") else {}
    for cls in type(subject).__mro__:
        slots = getattr(cls, "__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__") or slot in attributes:
                continue
            # Unset slots raise AttributeError and count as absent.
            try:
                attributes[slot] = getattr(subject, slot)
            except AttributeError:
                continue
    return attributes
