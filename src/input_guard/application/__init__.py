from input_guard.application.use_cases import (
    SanitizeInputRequest,
    SanitizeInputResult,
    SanitizeInputUseCase,
    StructureValidationResult,
    TypeValidationResult,
    UnknownTypeNameError,
    UserInputRules,
    UserInputValidationResult,
    ValidateStructureRequest,
    ValidateStructureUseCase,
    ValidateTypeRequest,
    ValidateTypeUseCase,
    ValidateUserInputRequest,
    ValidateUserInputUseCase,
)

__all__ = [
    "SanitizeInputRequest",
    "SanitizeInputResult",
    "SanitizeInputUseCase",
    "StructureValidationResult",
    "TypeValidationResult",
    "UnknownTypeNameError",
    "UserInputRules",
    "UserInputValidationResult",
    "ValidateStructureRequest",
    "ValidateStructureUseCase",
    "ValidateTypeRequest",
    "ValidateTypeUseCase",
    "ValidateUserInputRequest",
    "ValidateUserInputUseCase",
]
