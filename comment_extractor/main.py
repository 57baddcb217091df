import uvicorn

from comment_extractor.api.app import create_app
from comment_extractor.config.settings import Settings
from comment_extractor.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> serve the API."""
    settings = Settings()
    Log.configure(settings.log_level)
    Log.info(
        f"Starting comment extractor ({settings.app_env})",
        provider=settings.vision_provider,
        raster_engine=settings.raster_engine,
    )
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
