"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Storage
    DATABASE_PATH: str = "./database/portfolio.db"
    SEED_DEFAULTS: bool = True

    # Public content
    PUBLIC_DIR: str = "./public"
    UPLOADS_DIR_NAME: str = "uploads"
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024  # 10 MiB

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def uploads_dir(self) -> Path:
        """Directory that receives uploaded files."""
        return Path(self.PUBLIC_DIR) / self.UPLOADS_DIR_NAME


settings = Settings()
