"""
Main module entry point.

This allows running the API server as: python -m valetudo.main
"""

import uvicorn

from valetudo.main.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "valetudo.main.app:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
