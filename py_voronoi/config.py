"""Configuration management."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Render settings pulled from VORONOI_* environment variables or a .env file."""

    # Image
    width: int = Field(default=800, ge=1, description="Canvas width in pixels")
    height: int = Field(default=600, ge=1, description="Canvas height in pixels")
    focus_count: int = Field(default=20, ge=0, description="Number of random foci")
    dot_radius: float = Field(default=4.0, ge=0, description="Radius of the black dot drawn at each focus")

    # Generation
    seed: Optional[str] = Field(default=None, description="PRNG seed; random when unset")
    method: Literal["scan", "numpy"] = Field(default="numpy", description="Nearest-focus build method")

    # Output
    output_path: str = Field(default="voronoi.ppm", description="Destination PPM file")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["plain", "json"] = Field(default="plain", description="Logging format (plain or json)")

    class Config:
        env_prefix = "VORONOI_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings(**overrides) -> Settings:
    """
    Load settings, letting explicit keyword overrides win over the environment.

    Overrides whose value is None are ignored so unset command-line flags
    fall through to the environment and defaults.

    Raises:
        pydantic.ValidationError: If any value fails validation
    """
    explicit = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**explicit)
