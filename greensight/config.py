"""Application configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    greensight_env: str = "development"
    greensight_log_level: str = "info"

    # Shape classification
    concavity_threshold: float = 0.82
    elongation_threshold: float = 3.6

    # Anomalous-shape spine
    spine_steps: int = 15
    manual_rating_factor: float = 1.15

    # Walk recording
    min_point_spacing_m: float = 0.4
    auto_close_distance_m: float = 0.9
    auto_close_min_points: int = 20

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or settings.greensight_log_level).upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
