"""Configuration management."""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import dotenv_values
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Load .env for local/dev environments only for values missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    for key, value in file_env.items():
        if key not in os.environ and value is not None:
            os.environ[key] = value


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Enable debug mode")
    allowed_origins: str = Field(
        default="http://localhost:3000", description="CORS allowed origins"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Simulation Configuration
    default_seed: Optional[str] = Field(
        default=None, description="Seed for the default PRNG; unset means unpredictable"
    )
    soil_noise_probability: float = Field(
        default=0.2, description="Chance that a derived soil type is replaced at random"
    )
    farm_cell_count: int = Field(default=9, description="Number of cells in a farm grid")

    @field_validator("soil_noise_probability")
    @classmethod
    def _check_probability(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("soil_noise_probability must be between 0 and 1")
        return value

    @field_validator("farm_cell_count")
    @classmethod
    def _check_cell_count(cls, value: int) -> int:
        if value < 1:
            raise ValueError("farm_cell_count must be at least 1")
        return value

    @property
    def cors_origins(self) -> List[str]:
        """Allowed origins as a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
