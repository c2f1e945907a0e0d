from typing import Annotated

from fastapi import APIRouter, Depends

from input_guard.api.routers.validation import ERROR_RESPONSES, get_container
from input_guard.api.schemas import SanitizeRequestDTO, SanitizeResponseDTO
from input_guard.application import SanitizeInputRequest, SanitizeInputUseCase
from input_guard.shared.config import ApplicationContainer

router = APIRouter(prefix="/sanitization", tags=["sanitization"])


def get_sanitize_input_use_case(
    container: Annotated[ApplicationContainer, Depends(get_container)],
) -> SanitizeInputUseCase:
    return container.create_sanitize_input_use_case()


@router.post(
    "",
    response_model=SanitizeResponseDTO,
    summary="Sanitize text",
    description=(
        "Escape SQL punctuation and HTML special characters in every string of the payload. "
        "Best-effort filtering only; not a substitute for parameterized queries."
    ),
    responses={
        200: {
            "description": "Sanitized payload",
            "content": {
                "application/json": {
                    "example": {"sanitized": "alert(&quot;x&quot;)", "changed": True},
                }
            },
        },
        **ERROR_RESPONSES,
    },
)
async def sanitize(
    payload: SanitizeRequestDTO,
    use_case: Annotated[SanitizeInputUseCase, Depends(get_sanitize_input_use_case)],
) -> SanitizeResponseDTO:
    result = use_case.execute(
        SanitizeInputRequest(payload=payload.payload, passes=tuple(payload.passes))
    )
    return SanitizeResponseDTO(sanitized=result.sanitized, changed=result.changed)
