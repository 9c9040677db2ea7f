"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    metapixel_env: str = "development"
    metapixel_log_level: str = "info"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS
    cors_origins: list[str] = ["*"]

    # Title display profile (SERP title line)
    title_font_family: str = "Arial"
    title_font_size: float = 20.0
    title_max_pixels: int = 600

    # Description display profile (SERP snippet)
    description_font_family: str = "Arial"
    description_font_size: float = 14.0
    description_max_pixels: int = 920
    description_min_pixels: int = 430  # below this Google tends to auto-generate a snippet

    # Truncation preview
    ellipsis_reserve: float = 5.0
    ellipsis_marker: str = "..."

    # Font lookup
    font_dirs: list[str] = []
    fallback_fonts: list[str] = ["LiberationSans-Regular.ttf", "DejaVuSans.ttf"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def is_production(self) -> bool:
        return self.metapixel_env.lower() == "production"


settings = Settings()
