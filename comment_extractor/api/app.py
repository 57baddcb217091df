from fastapi import FastAPI

from comment_extractor.api.routes import router
from comment_extractor.config.settings import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the HTTP application around the given settings."""
    app = FastAPI(title="Comment Extractor API", version="1.0.0")
    app.state.settings = settings if settings is not None else Settings()
    app.include_router(router)
    return app
