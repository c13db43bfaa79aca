"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from app.engine.registry import get_registry
from app.engine.styles import PALETTE_DISPLAY_NAMES, ROOM_DISPLAY_NAMES, THEME_DISPLAY_NAMES
from app.models.responses import HealthResponse, OptionItem, OptionsResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        stages_registered=get_registry().count,
    )


@router.get("/options", response_model=OptionsResponse)
async def options() -> OptionsResponse:
    """Selectable request values with their display labels, in menu order."""
    return OptionsResponse(
        rooms=[OptionItem(value=k.value, label=v) for k, v in ROOM_DISPLAY_NAMES.items()],
        themes=[OptionItem(value=k.value, label=v) for k, v in THEME_DISPLAY_NAMES.items()],
        palettes=[OptionItem(value=k.value, label=v) for k, v in PALETTE_DISPLAY_NAMES.items()],
    )
