"""
Configuration settings for the sheet analysis engine.
Uses pydantic-settings for environment variable loading.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from SHEET_INSIGHTS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SHEET_INSIGHTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Upload limits (upstream of the analysis itself)
    preview_max_rows: int = 5000
    max_file_size_mb: int = 50

    # CLI output
    json_indent: int = 2

    @property
    def max_file_size_bytes(self) -> int:
        """Maximum accepted upload size in bytes."""
        return self.max_file_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
