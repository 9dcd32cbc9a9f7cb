# homework_diary/shared/config.py
from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "homework-diary"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "homework-diary"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- HTTP ---
    CORS_ORIGINS: List[str] = ["*"]

    # --- Fonts ---
    # Renderers only emit Telugu/Hindi text when the matching static TTF is present.
    FONTS_DIR: str = "fonts"
    TELUGU_FONT_FILE: str = "NotoSansTelugu-Regular.ttf"
    DEVANAGARI_FONT_FILE: str = "NotoSansDevanagari-Regular.ttf"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
