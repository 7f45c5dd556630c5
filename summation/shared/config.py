# summation\shared\config.py
from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic; every field can be
    overridden by an environment variable of the same name.
    """

    # --- Application Meta ---
    APP_NAME: str = "summation-service"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.JSON
    OTEL_SERVICE_NAME: str = "summation-service"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- HTTP Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    # Prefix for the /sum router, e.g. "/api/v1". Empty means root level.
    API_PREFIX: str = ""
    CORS_ORIGINS: List[str] = ["*"]

    @property
    def api_root(self) -> str:
        """API_PREFIX normalized to "" or "/segment" without a trailing slash."""
        prefix = self.API_PREFIX.strip().rstrip("/")
        if prefix and not prefix.startswith("/"):
            prefix = "/" + prefix
        return prefix

    @property
    def docs_enabled(self) -> bool:
        return self.APP_ENV != AppEnv.PRODUCTION

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
