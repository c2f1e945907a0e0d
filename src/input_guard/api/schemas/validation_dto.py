from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from input_guard.domain import StructureMismatch, ValueCategory
from input_guard.shared.security import SanitizerPass

TypeName = Literal["string", "number", "integer", "boolean", "object", "array", "null"]


class StructureValidationRequestDTO(BaseModel):
    """Request body for `POST /api/v1/validation/structure`."""

    shape: Any = Field(examples=[{"name": "string", "tags": ["string"]}])
    payload: Any = Field(examples=[{"name": "Ana", "tags": ["admin"]}])
    require_non_empty: bool = False


class StructureMismatchDTO(BaseModel):
    """First structural mismatch found in the payload."""

    path: str
    message: str
    expected: Any = None
    actual: ValueCategory | None = None
    key: str | None = None

    @classmethod
    def from_mismatch(cls, mismatch: StructureMismatch) -> StructureMismatchDTO:
        return cls(
            path=mismatch.path,
            message=mismatch.message,
            expected=mismatch.expected,
            actual=mismatch.actual,
            key=None if mismatch.key is None else str(mismatch.key),
        )


class StructureValidationResponseDTO(BaseModel):
    valid: bool
    mismatch: StructureMismatchDTO | None = None
    empty_field_error: str | None = None


class TypeValidationRequestDTO(BaseModel):
    """Request body for `POST /api/v1/validation/type`."""

    type_name: TypeName = Field(examples=["number"])
    value: Any = Field(default=None, examples=[42])


class TypeValidationResponseDTO(BaseModel):
    valid: bool
    message: str | None = None


class UserInputValidationRequestDTO(BaseModel):
    """Request body for `POST /api/v1/validation/user-input`; omitted fields are skipped."""

    email: str | None = Field(default=None, examples=["ana@example.com"])
    user_name: str | None = Field(default=None, examples=["ana2026"])
    password: str | None = Field(default=None, examples=["Password1!"])
    url: str | None = Field(default=None, examples=["https://example.com"])

    model_config = ConfigDict(extra="forbid")


class UserInputValidationResponseDTO(BaseModel):
    valid: bool
    errors: dict[str, str] = Field(default_factory=dict)


class SanitizeRequestDTO(BaseModel):
    """Request body for `POST /api/v1/sanitization`."""

    payload: Any = Field(examples=['<script>alert("x")</script>'])
    passes: list[SanitizerPass] = Field(
        default_factory=lambda: [SanitizerPass.SQL, SanitizerPass.HTML],
        min_length=1,
    )


class SanitizeResponseDTO(BaseModel):
    sanitized: Any
    changed: bool


class ErrorResponseDTO(BaseModel):
    """Error payload used for rule violations, request validation and server failures."""

    error: str
    message: str
    request_id: str | None = None
    code: str | None = None
