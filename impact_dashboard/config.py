"""
Configuration settings for the Impact Dashboard.

Uses Pydantic Settings to load environment variables for the generation window,
the random seed, aggregation defaults and logging.
"""
from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from impact_dashboard.domain.models import Granularity


class Settings(BaseSettings):
    # Generation
    seed: Optional[int] = Field(None, alias="DASHBOARD_SEED")
    start_date: date = Field(date(2024, 7, 1), alias="DASHBOARD_START_DATE")
    end_date: date = Field(date(2025, 7, 31), alias="DASHBOARD_END_DATE")

    # Aggregation
    flat_span_days: int = Field(365, gt=0, alias="DASHBOARD_FLAT_SPAN_DAYS")
    granularity: Granularity = Field(Granularity.MONTHLY, alias="DASHBOARD_GRANULARITY")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")
    results_dir: str = Field("results", alias="RESULTS_DIR")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _check_window(self) -> "Settings":
        if self.end_date < self.start_date:
            raise ValueError(
                f"DASHBOARD_END_DATE {self.end_date} is before DASHBOARD_START_DATE {self.start_date}"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
