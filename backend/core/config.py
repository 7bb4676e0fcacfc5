from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console output

    # Drill
    DRILL_LANGUAGE: str = "es"
    RECENCY_CAPACITY: int = 30  # Recently returned task ids kept out of rotation
    OPTION_COUNT: int = 6       # Target size of a multiple-choice set
    BLANK_MARKER: str = "___"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
