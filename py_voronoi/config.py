"""Configuration management."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Window
    window_width: int = Field(default=1280, gt=0, description="Canvas width in pixels")
    window_height: int = Field(default=720, gt=0, description="Canvas height in pixels")
    window_title: str = Field(default="Interactive Voronoi", description="Window title")
    frame_interval_ms: int = Field(
        default=33, gt=0, description="Delay between render ticks in milliseconds"
    )

    # Interaction
    random_count: int = Field(
        default=50, ge=0, description="Number of random sites placed by the R key"
    )
    lines_only: bool = Field(default=False, description="Start in outline-only mode")
    json_dots: Optional[str] = Field(
        default=None, description="JSON file of sites to preload at startup"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="plain", description="Log format (plain or json)")

    @property
    def canvas_bounds(self) -> tuple:
        """Canvas size as (width, height)."""
        return (float(self.window_width), float(self.window_height))

    class Config:
        env_file = ".env"
        env_prefix = "PY_VORONOI_"

