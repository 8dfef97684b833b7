"""
Application settings and configuration management using Pydantic BaseSettings.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict
from enum import Enum

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Environment enumeration"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class NegativeAmountPolicy(str, Enum):
    """How the chart engine treats negative amounts."""
    CLAMP = "clamp"
    REJECT = "reject"


class ChartConfig(BaseSettings):
    """Donut chart geometry and presentation settings."""
    default_size: float = Field(default=240.0, gt=0)
    padding: float = Field(default=10.0, ge=0)
    inner_radius_ratio: float = Field(default=0.55, gt=0, lt=1)
    selected_offset: float = Field(default=8.0, ge=0)
    min_tap_size: float = Field(default=60.0, gt=0)
    full_circle_threshold: float = Field(default=359.9, gt=180, le=360)
    start_angle: float = Field(default=-90.0)
    epsilon: float = Field(default=1e-6, gt=0)
    negative_amount_policy: NegativeAmountPolicy = NegativeAmountPolicy.CLAMP
    currency: str = Field(default="INR", pattern=r"^[A-Z]{3}$")
    aggregate_caption: str = "Total"
    aggregate_subcaption: str = "Expenses"
    dimmed_opacity: float = Field(default=0.6, ge=0, le=1)

    model_config = SettingsConfigDict(env_prefix="CHART_", extra="ignore")

    @field_validator("negative_amount_policy", mode="before")
    @classmethod
    def normalize_policy(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    def radii_for(self, size: float) -> Dict[str, float]:
        """Get centre and radii for a drawing surface of the given diameter."""
        outer = size / 2 - self.padding
        return {
            "center": size / 2,
            "outer_radius": outer,
            "inner_radius": outer * self.inner_radius_ratio,
        }


class AppConfig(BaseSettings):
    """Application configuration settings."""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    log_level: str = "INFO"
    page_title: str = "BuildLedger Reports"

    model_config = SettingsConfigDict(env_prefix="APP_", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'Log level must be one of: {valid_levels}')
        return v.upper()


class Settings(BaseSettings):
    """Centralized application settings manager using Pydantic BaseSettings."""

    app: AppConfig = Field(default_factory=AppConfig)
    chart: ChartConfig = Field(default_factory=ChartConfig)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    def __init__(self, **kwargs):
        self._load_env_file()
        super().__init__(**kwargs)

    @staticmethod
    def _load_env_file() -> None:
        """Load environment variables from .env file."""
        env_file = Path('.env')
        if env_file.exists():
            from dotenv import load_dotenv
            load_dotenv(env_file)

    @model_validator(mode="after")
    def check_chart_geometry(self) -> "Settings":
        radii = self.chart.radii_for(self.chart.default_size)
        if radii["outer_radius"] <= 0:
            raise ValueError("Chart padding leaves no room for the donut at the default size")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Dump settings for diagnostics."""
        return self.model_dump(mode="json")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return Settings()
