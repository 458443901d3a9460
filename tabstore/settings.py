"""
Runtime configuration.

Values load from ``TABSTORE_*`` environment variables or a ``.env`` file in
the working directory; CLI flags override them.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .rules import COLUMN_WIDTH, CURRENCY_SYMBOL

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TABSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_path: Path = Field(default=Path("data.csv"), description="Table source to load")
    column_width: int = Field(default=COLUMN_WIDTH, ge=1)
    currency_symbol: str = CURRENCY_SYMBOL
    create_demo: bool = Field(default=True, description="Materialize the demo dataset when data_path is missing")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


def get_settings() -> Settings:
    return Settings()
