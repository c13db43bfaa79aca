"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    genarch_env: str = "development"
    genarch_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Remote generation backend (mode=backend)
    generation_api_base: str = ""
    generation_api_key: str = ""
    generation_timeout_s: float = 60.0

    # Upload guard
    max_upload_mb: float = 20.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def max_upload_bytes(self) -> int:
        return int(self.max_upload_mb * 1024 * 1024)


settings = Settings()
