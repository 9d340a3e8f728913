"""
Process entry point: `python -m quoteservice`.

Serves the application built by `quoteservice.main` with uvicorn on
BACKEND_HOST:BACKEND_PORT.
"""

import uvicorn

from quoteservice.config import settings
from quoteservice.main import app


def main() -> None:
    uvicorn.run(
        app,
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
