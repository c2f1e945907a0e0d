from input_guard.application.use_cases.sanitize_input_use_case import (
    DEFAULT_PASSES,
    SanitizeInputRequest,
    SanitizeInputResult,
    SanitizeInputUseCase,
)
from input_guard.application.use_cases.validate_structure_use_case import (
    StructureValidationResult,
    ValidateStructureRequest,
    ValidateStructureUseCase,
)
from input_guard.application.use_cases.validate_type_use_case import (
    TYPE_DESCRIPTORS_BY_NAME,
    TypeValidationResult,
    UnknownTypeNameError,
    ValidateTypeRequest,
    ValidateTypeUseCase,
)
from input_guard.application.use_cases.validate_user_input_use_case import (
    UserInputRules,
    UserInputValidationResult,
    ValidateUserInputRequest,
    ValidateUserInputUseCase,
)

__all__ = [
    "DEFAULT_PASSES",
    "SanitizeInputRequest",
    "SanitizeInputResult",
    "SanitizeInputUseCase",
    "StructureValidationResult",
    "TYPE_DESCRIPTORS_BY_NAME",
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
