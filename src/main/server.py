"""
Server Entry Point - Main Layer

Runs the FastAPI application with uvicorn using the configured host, port
and reload settings.
"""

import uvicorn

from src.main.config import get_settings


def main() -> None:
    """Start the API server."""
    settings = get_settings()
    uvicorn.run(
        "src.main.app:app",
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
