from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    raster_engine: str = "pymupdf"
    raster_scale: float = Field(default=2.0, ge=2.0)

    vision_provider: str = "gemini"
    vision_model_name: str = ""
    vision_base_url: str = ""
    vision_timeout_seconds: int = 300
    vision_temperature: float = 0.0

    fallback_text_max_length: int = Field(default=500, gt=0)
