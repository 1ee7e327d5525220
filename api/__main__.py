"""Run the API server: python -m api"""
import uvicorn

from core.infrastructure.logging import get_logger
from core.settings import get_app_settings


def main() -> None:
    settings = get_app_settings().server
    logger = get_logger("api", settings.log_level)

    logger.info(f"Server listening at http://{settings.host}:{settings.port}")
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
