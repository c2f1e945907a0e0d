from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from input_guard.api.middleware import (
    BodySizeLimitMiddleware,
    ErrorHandlerMiddleware,
    validation_exception_handler,
)
from input_guard.api.routers.health import router as health_router
from input_guard.api.routers.sanitization import router as sanitization_router
from input_guard.api.routers.validation import router as validation_router
from input_guard.shared.config import ApplicationContainer, settings


def create_app() -> FastAPI:
    """Build and configure the FastAPI application instance."""
    app = FastAPI(
        title=settings.app_name,
        debug=settings.app_debug,
        version=settings.app_version,
    )
    app.state.container = ApplicationContainer(settings)
    if settings.cors_allowed_origins_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_allowed_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(
        BodySizeLimitMiddleware,
        max_body_bytes=settings.max_request_body_bytes,
    )
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(validation_router, prefix="/api/v1")
    app.include_router(sanitization_router, prefix="/api/v1")
    return app
