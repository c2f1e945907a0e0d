import logging

import uvicorn

from input_guard.api.app import create_app
from input_guard.shared.config import settings

app = create_app()


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    logging.basicConfig(level=logging.DEBUG if settings.app_debug else logging.INFO)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
