"""
Pydantic Settings: centralized configuration loaded from environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    API_PREFIX: str = "/api/v1"

    # ── Logging ───────────────────────────────
    LOG_LEVEL: str = ""
    LOG_JSON: bool | None = None

    # Offending request bodies are written to the log on decode failure;
    # anything past this many characters is cut off.
    LOG_PAYLOAD_MAX_CHARS: int = Field(default=1024, ge=16)

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}

    @property
    def log_level(self) -> str:
        """Explicit LOG_LEVEL, else DEBUG in development and INFO elsewhere."""
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "DEBUG" if self.APP_ENV == "development" else "INFO"

    @property
    def log_json(self) -> bool:
        """JSON log lines everywhere except development, unless overridden."""
        if self.LOG_JSON is not None:
            return self.LOG_JSON
        return self.APP_ENV != "development"


settings = Settings()
