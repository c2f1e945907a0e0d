from dataclasses import dataclass
from typing import Any

from input_guard.domain import (
    EmptyValueError,
    StructureMismatch,
    validate_by_structure,
    validate_non_empty_fields,
)
from input_guard.shared.logging import ValidationAuditLogger


@dataclass(frozen=True, slots=True)
class ValidateStructureRequest:
    shape: Any
    payload: Any
    require_non_empty: bool = False


@dataclass(frozen=True, slots=True)
class StructureValidationResult:
    mismatch: StructureMismatch | None = None
    empty_field_error: str | None = None

    @property
    def valid(self) -> bool:
        return self.mismatch is None and self.empty_field_error is None


class ValidateStructureUseCase:
    """Match a payload against a shape descriptor and optionally reject empty fields.

    Example:
        ```python
        use_case = ValidateStructureUseCase()
        result = use_case.execute(ValidateStructureRequest(shape={"id": "number"}, payload={"id": 1}))
        assert result.valid
        ```
    """

    def __init__(
        self,
        audit_logger: ValidationAuditLogger | None = None,
        non_empty_max_depth: int = 10,
    ) -> None:
        if non_empty_max_depth <= 0:
            raise ValueError("non_empty_max_depth must be greater than zero")
        self._audit_logger = audit_logger or ValidationAuditLogger()
        self._non_empty_max_depth = non_empty_max_depth

    def execute(self, request: ValidateStructureRequest) -> StructureValidationResult:
        """Return the first structural mismatch or empty field found, if any."""
        mismatch = validate_by_structure(request.shape, request.payload)
        if mismatch is not None:
            self._audit_logger.log_validation_failed(
                operation="structure",
                reason=mismatch.message,
                context={"path": mismatch.path},
            )
            return StructureValidationResult(mismatch=mismatch)

        if request.require_non_empty:
            try:
                validate_non_empty_fields(request.payload, self._non_empty_max_depth)
            except EmptyValueError as exc:
                self._audit_logger.log_validation_failed(operation="non_empty_fields", reason=str(exc))
                return StructureValidationResult(empty_field_error=str(exc))

        self._audit_logger.log_validation_passed(operation="structure")
        return StructureValidationResult()
