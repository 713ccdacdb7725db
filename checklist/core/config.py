"""Application configuration."""
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from extraction.patterns import CATEGORY_LABELS


class Settings(BaseSettings):
    """Settings loaded from CHECKLIST_* environment variables or a .env file."""

    # Group headers the parser recognizes (JSON list in the environment)
    category_labels: List[str] = list(CATEGORY_LABELS)

    # Logging
    log_level: str = "INFO"

    # UI
    page_title: str = "Door & Drawer Parser"

    model_config = SettingsConfigDict(
        env_prefix="CHECKLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
