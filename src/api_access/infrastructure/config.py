"""Runtime settings, read from the environment (``API_ACCESS_*``) or ``.env``."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class ApiAccessSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="API_ACCESS_",
        env_file=".env",
        extra="ignore",
    )

    data_dir: Path = _DEFAULT_DATA_DIR

    # Storage limits
    client_name_max_length: int = Field(default=255, gt=0)
    api_client_id_max_length: int = Field(default=255, gt=0)
    description_max_length: int = Field(default=21844, gt=0)

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level
