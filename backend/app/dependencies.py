"""FastAPI dependency injection."""

from __future__ import annotations

from app.config import Settings, settings
from app.remote.client import BackendAdapter


def get_settings() -> Settings:
    return settings


def get_backend_adapter() -> BackendAdapter:
    return BackendAdapter(
        api_base=settings.generation_api_base,
        api_key=settings.generation_api_key,
        timeout=settings.generation_timeout_s,
    )
