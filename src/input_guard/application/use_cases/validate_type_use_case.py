from dataclasses import dataclass
from typing import Any

from input_guard.domain import InputValidationError, TypeMismatchError, validate_type
from input_guard.shared.logging import ValidationAuditLogger

TYPE_DESCRIPTORS_BY_NAME: dict[str, Any] = {
    "string": str,
    "number": float,
    "integer": int,
    "boolean": bool,
    "object": dict,
    "array": list,
    "null": None,
}


class UnknownTypeNameError(InputValidationError):
    """Raised when a type name has no registered type descriptor."""

    pass


@dataclass(frozen=True, slots=True)
class ValidateTypeRequest:
    type_name: str
    value: Any


@dataclass(frozen=True, slots=True)
class TypeValidationResult:
    valid: bool
    message: str | None = None


class ValidateTypeUseCase:
    """Check a JSON value against a named type through the type guard."""

    def __init__(self, audit_logger: ValidationAuditLogger | None = None) -> None:
        self._audit_logger = audit_logger or ValidationAuditLogger()

    def execute(self, request: ValidateTypeRequest) -> TypeValidationResult:
        """Return whether the value matches the named type; raise on unknown names."""
        if request.type_name not in TYPE_DESCRIPTORS_BY_NAME:
            raise UnknownTypeNameError(f"Unknown type name: {request.type_name}")

        try:
            validate_type(TYPE_DESCRIPTORS_BY_NAME[request.type_name], request.value)
        except TypeMismatchError as exc:
            self._audit_logger.log_validation_failed(
                operation="type",
                reason=str(exc),
                context={"type_name": request.type_name},
            )
            return TypeValidationResult(valid=False, message=str(exc))

        self._audit_logger.log_validation_passed(
            operation="type",
            context={"type_name": request.type_name},
        )
        return TypeValidationResult(valid=True)
