"""Run the API with uvicorn: ``python -m user_api``."""

import uvicorn

from user_api.config import settings


def main() -> None:
    uvicorn.run(
        "user_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,  # structlog owns the root logger
    )


if __name__ == "__main__":
    main()
