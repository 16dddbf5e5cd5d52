import logging
from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_DATA_DIR = Path(__file__).parent / "data"

DEFAULT_MAJOR_HUBS = [
    "Guindy", "Central Station", "Saidapet", "Thiruvanmiyur", "Adyar Depot",
    "Koyambedu", "Egmore", "St. Thomas Mount", "T. Nagar", "Parrys Corner",
    "Tambaram", "Avadi", "Ambattur", "Perambur", "Park", "Chennai Beach",
]


class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "Chennai Trip Planner"
    API_PREFIX: str = "/api"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Dataset
    DATA_DIR: Path = DEFAULT_DATA_DIR
    REQUIRE_DATASET: bool = False

    # Search
    MAJOR_HUBS: List[str] = DEFAULT_MAJOR_HUBS
    MAX_DIRECT_ROUTES: int = 3
    MAX_ONE_TRANSFER_ROUTES: int = 3
    MAX_TWO_TRANSFER_ROUTES: int = 2

    @field_validator("MAX_DIRECT_ROUTES", "MAX_ONE_TRANSFER_ROUTES", "MAX_TWO_TRANSFER_ROUTES")
    @classmethod
    def validate_result_cap(cls, value: int) -> int:
        if value < 0:
            raise ValueError("result caps must not be negative")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {value!r}")
        return level

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
