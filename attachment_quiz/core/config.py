from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import math
import os

from attachment_quiz.constants import DEFAULT_THRESHOLD

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./attachment_quiz.db"
    database_echo: bool = False
    # Tuned over time (3.0 -> 3.2); keep it out of the comparisons themselves
    result_threshold: float = DEFAULT_THRESHOLD
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(extra="ignore")

    @field_validator("result_threshold")
    @classmethod
    def _threshold_must_be_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("result_threshold must be a finite number")
        return value


# Instantiate settings
settings = Settings()


if __name__ == "__main__":
    # For testing the configuration loading
    print("Attachment Quiz Configuration:")
    print(f"  Database URL: {settings.database_url}")
    print(f"  Result threshold: {settings.result_threshold}")
    print(f"  Log level: {settings.log_level}")
    print("\nOverride with DATABASE_URL, DATABASE_ECHO, RESULT_THRESHOLD, LOG_LEVEL, CORS_ORIGINS.")
