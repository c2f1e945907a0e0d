from collections.abc import Awaitable, Callable

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

from input_guard.api.schemas import ErrorResponseDTO


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject request bodies larger than the configured bound.

    A declared `Content-Length` is checked before anything is read. Bodies sent
    without one (chunked transfer) are read once and measured; the cached body stays
    readable by the route.
    """

    def __init__(self, app, *, max_body_bytes: int = 1_048_576) -> None:  # type: ignore[no-untyped-def]
        super().__init__(app)
        if max_body_bytes <= 0:
            raise ValueError("max_body_bytes must be greater than zero")
        self._max_body_bytes = max_body_bytes

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        declared = request.headers.get("content-length")
        if declared is not None:
            if declared.isdigit() and int(declared) > self._max_body_bytes:
                return self._too_large()
        elif len(await request.body()) > self._max_body_bytes:
            return self._too_large()
        return await call_next(request)

    def _too_large(self) -> JSONResponse:
        return JSONResponse(
            status_code=413,
            content=ErrorResponseDTO(
                error="Payload too large",
                message=f"Request body exceeds {self._max_body_bytes} bytes.",
                code="PAYLOAD_TOO_LARGE",
            ).model_dump(),
        )
