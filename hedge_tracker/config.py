"""Application configuration via environment variables."""

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]  # Vite dev server

    # Engine defaults
    default_leverage: float = 100.0
    monthly_volume_target: float = 500_000.0
    starting_equity: float = 100_000.0
    maintenance_percent: float = 0.5  # percent, 0.5 means 0.5%
    safety_percent: float = 30.0  # percent of balance held back as cushion

    model_config = {"env_prefix": "HT_", "env_file": ".env"}


class EngineConfig(BaseModel):
    """Policy defaults handed to the aggregators and the risk calculator."""

    default_leverage: float = Field(default=100.0, gt=0)
    monthly_volume_target: float = Field(default=500_000.0, ge=0)
    starting_equity: float = 100_000.0
    maintenance_percent: float = 0.5
    safety_percent: float = 30.0

    model_config = {"frozen": True}

    @classmethod
    def from_settings(cls, source: Settings) -> "EngineConfig":
        return cls(
            default_leverage=source.default_leverage,
            monthly_volume_target=source.monthly_volume_target,
            starting_equity=source.starting_equity,
            maintenance_percent=source.maintenance_percent,
            safety_percent=source.safety_percent,
        )


settings = Settings()
