"""API request models."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class RoomCategory(str, enum.Enum):
    LIVING_ROOM = "living-room"
    BEDROOM = "bedroom"
    KITCHEN = "kitchen"
    OFFICE = "office"
    OTHER = "other"


class Theme(str, enum.Enum):
    MODERN = "modern"
    MINIMAL = "minimal"
    RUSTIC = "rustic"
    LUXURY = "luxury"
    INDUSTRIAL = "industrial"


class Palette(str, enum.Enum):
    NEUTRAL = "neutral"
    WARM = "warm"
    COOL = "cool"
    BOLD = "bold"
    EARTHY = "earthy"


class GenerationMode(str, enum.Enum):
    MOCK = "mock"  # local compositor
    BACKEND = "backend"  # remote generation service


class GenerationRequest(BaseModel):
    """Design preferences for one generation call. Frozen once built."""

    model_config = {"frozen": True, "populate_by_name": True}

    room_category: RoomCategory = Field(
        default=RoomCategory.LIVING_ROOM,
        alias="roomType",
        description="Room / space category",
    )
    theme: Theme = Field(default=Theme.MODERN, description="Design theme")
    palette: Palette = Field(default=Palette.NEUTRAL, description="Colour palette")
    budget: float = Field(default=300000, ge=0, allow_inf_nan=False, description="Budget in INR")
    notes: str = Field(default="", description="Free-text preferences")
