"""Configuration management using Pydantic Settings"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROFILES_PATH = Path(__file__).resolve().parent / "data" / "profiles.json"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "credit-coach"
    log_level: str = "INFO"

    # Profile source (JSON array of profiles); bundled sample set when unset
    profiles_path: Optional[Path] = None

    # Advisor
    advice_max_actions: int = 3

    @property
    def resolved_profiles_path(self) -> Path:
        return self.profiles_path or DEFAULT_PROFILES_PATH


settings = Settings()
