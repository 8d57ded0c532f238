from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    CATALOG_PATH: Path = PROJECT_ROOT / "books.json"
    # Compared case-insensitively against the stripped input line
    EXIT_TOKEN: str = "exit"
    LOG_LEVEL: str = "WARNING"


settings = Settings()
