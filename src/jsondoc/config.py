"""Configuration management for jsondoc."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Inference
    max_inference_depth: int = Field(
        default=200, ge=1, description="Deepest nesting accepted by infer()"
    )

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="JSONDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
