from typing import Annotated

from fastapi import APIRouter, Depends, Request

from input_guard.api.schemas import (
    ErrorResponseDTO,
    StructureMismatchDTO,
    StructureValidationRequestDTO,
    StructureValidationResponseDTO,
    TypeValidationRequestDTO,
    TypeValidationResponseDTO,
    UserInputValidationRequestDTO,
    UserInputValidationResponseDTO,
)
from input_guard.application import (
    ValidateStructureRequest,
    ValidateStructureUseCase,
    ValidateTypeRequest,
    ValidateTypeUseCase,
    ValidateUserInputRequest,
    ValidateUserInputUseCase,
)
from input_guard.shared.config import ApplicationContainer

router = APIRouter(prefix="/validation", tags=["validation"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponseDTO, "description": "Input rule violation"},
    413: {"model": ErrorResponseDTO, "description": "Payload too large"},
    422: {"model": ErrorResponseDTO, "description": "Validation error"},
    500: {"model": ErrorResponseDTO, "description": "Internal server error"},
}


def get_container(request: Request) -> ApplicationContainer:
    """Resolve the application container, building a default one when absent."""
    container: ApplicationContainer | None = getattr(request.app.state, "container", None)
    if container is None:
        container = ApplicationContainer()
        request.app.state.container = container
    return container


def get_validate_structure_use_case(
    container: Annotated[ApplicationContainer, Depends(get_container)],
) -> ValidateStructureUseCase:
    return container.create_validate_structure_use_case()


def get_validate_type_use_case(
    container: Annotated[ApplicationContainer, Depends(get_container)],
) -> ValidateTypeUseCase:
    return container.create_validate_type_use_case()


def get_validate_user_input_use_case(
    container: Annotated[ApplicationContainer, Depends(get_container)],
) -> ValidateUserInputUseCase:
    return container.create_validate_user_input_use_case()


@router.post(
    "/structure",
    response_model=StructureValidationResponseDTO,
    summary="Validate payload structure",
    description="Match a payload against a shape descriptor and report the first mismatch.",
    responses={
        200: {
            "description": "Validation outcome",
            "content": {
                "application/json": {
                    "example": {
                        "valid": False,
                        "mismatch": {
                            "path": "",
                            "message": 'Missing key "age" at path ""',
                            "expected": "number",
                            "actual": None,
                            "key": "age",
                        },
                        "empty_field_error": None,
                    }
                }
            },
        },
        **ERROR_RESPONSES,
    },
)
async def validate_structure(
    payload: StructureValidationRequestDTO,
    use_case: Annotated[ValidateStructureUseCase, Depends(get_validate_structure_use_case)],
) -> StructureValidationResponseDTO:
    result = use_case.execute(
        ValidateStructureRequest(
            shape=payload.shape,
            payload=payload.payload,
            require_non_empty=payload.require_non_empty,
        )
    )
    return StructureValidationResponseDTO(
        valid=result.valid,
        mismatch=None if result.mismatch is None else StructureMismatchDTO.from_mismatch(result.mismatch),
        empty_field_error=result.empty_field_error,
    )


@router.post(
    "/type",
    response_model=TypeValidationResponseDTO,
    summary="Validate value type",
    responses=ERROR_RESPONSES,
)
async def validate_value_type(
    payload: TypeValidationRequestDTO,
    use_case: Annotated[ValidateTypeUseCase, Depends(get_validate_type_use_case)],
) -> TypeValidationResponseDTO:
    result = use_case.execute(ValidateTypeRequest(type_name=payload.type_name, value=payload.value))
    return TypeValidationResponseDTO(valid=result.valid, message=result.message)


@router.post(
    "/user-input",
    response_model=UserInputValidationResponseDTO,
    summary="Validate user fields",
    description="Validate email, username, password and URL fields; omitted fields are skipped.",
    responses=ERROR_RESPONSES,
)
async def validate_user_input(
    payload: UserInputValidationRequestDTO,
    use_case: Annotated[ValidateUserInputUseCase, Depends(get_validate_user_input_use_case)],
) -> UserInputValidationResponseDTO:
    result = use_case.execute(
        ValidateUserInputRequest(
            email=payload.email,
            user_name=payload.user_name,
            password=payload.password,
            url=payload.url,
        )
    )
    return UserInputValidationResponseDTO(valid=result.valid, errors=result.errors)
