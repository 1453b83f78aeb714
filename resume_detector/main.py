import uvicorn

from resume_detector.api.app import create_app
from resume_detector.config.settings import Settings
from resume_detector.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> serve the API."""
    settings = Settings()
    Log.configure(settings.log_level)

    app = create_app(settings)
    Log.info(f"Starting API on {settings.api_host}:{settings.api_port} ({settings.app_env})")
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
