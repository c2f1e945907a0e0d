from fastapi import APIRouter

from input_guard.shared.config import settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
async def health_check() -> dict[str, str]:
    """Return service health status and version."""
    return {"status": "ok", "version": settings.app_version}
