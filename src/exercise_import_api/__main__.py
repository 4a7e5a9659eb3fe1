"""Run the API with uvicorn: ``python -m exercise_import_api``."""
import uvicorn

from exercise_import_api.config import settings


def main():
    uvicorn.run(
        "exercise_import_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
