"""Run the API with uvicorn: ``python -m taskapi``."""

import uvicorn

from taskapi.config import settings


def main() -> None:
    uvicorn.run(
        "taskapi.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
