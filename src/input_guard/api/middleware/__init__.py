from input_guard.api.middleware.body_size_limit import BodySizeLimitMiddleware
from input_guard.api.middleware.error_handler import (
    ErrorHandlerMiddleware,
    validation_exception_handler,
)

__all__ = [
    "BodySizeLimitMiddleware",
    "ErrorHandlerMiddleware",
    "validation_exception_handler",
]
