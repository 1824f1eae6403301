"""Runtime configuration for the Nightreign seed finder."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="NIGHTREIGN_SEEDS_", env_file=".env", extra="ignore")

    app_name: str = "nightreign-seeds"
    log_level: str = "INFO"
    catalog_path: str = Field(
        default="dataset/dataset.json",
        description="Path to the dataset JSON holding poiDatabase and optional classifications.",
    )
    ground_truth_source: Literal["poi_database", "classifications"] = Field(
        default="poi_database",
        description="Where POI kinds are read from: poi_database or classifications.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


settings = Settings()
