"""
Main module entry point.

Runs the HTTP service with uvicorn: ``python -m maker_bridge.main``
"""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "maker_bridge.main.app:app",
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
        log_level=settings.logging.level.value.lower(),
    )


if __name__ == "__main__":
    main()
