"""Application configuration helpers."""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Centralized configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=str(BASE_DIR / ".env"), env_file_encoding="utf-8")

    app_name: str = "Product Table"
    environment: str = "dev"
    log_level: str = "INFO"

    # Startup data (the table itself is in-memory only)
    seed_demo_data: bool = True
    seed_csv_path: Optional[Path] = None

    # API behavior
    allow_origins: List[str] = ["http://localhost:5173", "http://localhost:3000", "http://127.0.0.1:8080"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
