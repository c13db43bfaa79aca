"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.models.requests import GenerationMode


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class OptionItem(BaseModel):
    value: str
    label: str


class OptionsResponse(BaseModel):
    rooms: list[OptionItem] = Field(default_factory=list)
    themes: list[OptionItem] = Field(default_factory=list)
    palettes: list[OptionItem] = Field(default_factory=list)


class GenerateResponse(BaseModel):
    images: list[str] = Field(default_factory=list, description="Data URLs or backend image references")
    mode: GenerationMode = GenerationMode.MOCK
    processing_time_ms: float = 0.0
