"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from ductsketch.engine.config import SketchConfig


class Settings(BaseSettings):
    ductsketch_env: str = "development"
    ductsketch_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:4200"]

    # Pipe sketch tuning
    pipe_thickness: float = 150.0
    turn_threshold: float = 150.0
    min_preview_length: float = 5.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def sketch_config(self) -> SketchConfig:
        return SketchConfig(
            pipe_thickness=self.pipe_thickness,
            turn_threshold=self.turn_threshold,
            min_preview_length=self.min_preview_length,
        )


settings = Settings()
