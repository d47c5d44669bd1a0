"""
Configuration management for Gorillas.
Uses pydantic-settings for environment variable parsing.

Every field can be overridden with a GORILLAS_-prefixed environment
variable (e.g. GORILLAS_WIND_SPEED=-3.5) or a .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Run parameters, read once per reset."""

    # Canvas
    canvas_width: int = Field(
        default=640,
        gt=0,
        description="Playfield width in pixels"
    )
    canvas_height: int = Field(
        default=350,
        gt=0,
        description="Playfield height in pixels"
    )

    # Clock
    frames_per_second: float = Field(
        default=10,
        gt=0,
        description="Tick rate of the simulation clock"
    )

    # Environment
    wind_speed: float = Field(
        default=0.0,
        description="Signed horizontal wind in metres per second"
    )
    gravity: float = Field(
        default=9.8,
        ge=0,
        description="Downward acceleration in metres per second squared"
    )

    # Throws
    number_of_bananas: int = Field(
        default=1,
        ge=0,
        description="Bananas launched at each reset, alternating throwers"
    )
    launch_velocity: float = Field(
        default=50.0,
        ge=0,
        description="Launch speed of each banana in metres per second"
    )
    launch_angle_dg: float = Field(
        default=45.0,
        description="Launch angle above the horizontal in degrees"
    )

    # Effects
    explosion_ttl_seconds: float = Field(
        default=1.0,
        gt=0,
        description="How long an explosion stays in the world"
    )

    # Randomness
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for city generation and placement. None means random"
    )

    class Config:
        env_prefix = "GORILLAS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Used by the entry point when no explicit settings are given.
    """
    return Settings()
