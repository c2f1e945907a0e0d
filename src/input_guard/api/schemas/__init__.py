from input_guard.api.schemas.validation_dto import (
    ErrorResponseDTO,
    SanitizeRequestDTO,
    SanitizeResponseDTO,
    StructureMismatchDTO,
    StructureValidationRequestDTO,
    StructureValidationResponseDTO,
    TypeValidationRequestDTO,
    TypeValidationResponseDTO,
    UserInputValidationRequestDTO,
    UserInputValidationResponseDTO,
)

__all__ = [
    "ErrorResponseDTO",
    "SanitizeRequestDTO",
    "SanitizeResponseDTO",
    "StructureMismatchDTO",
    "StructureValidationRequestDTO",
    "StructureValidationResponseDTO",
    "TypeValidationRequestDTO",
    "TypeValidationResponseDTO",
    "UserInputValidationRequestDTO",
    "UserInputValidationResponseDTO",
]
