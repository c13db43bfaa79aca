"""GenArch procedural visualization compositor."""

from app.engine.registry import stage, Phase, get_registry
from app.engine.context import RenderContext, PlacedBlock, CaptionBox
from app.engine.errors import DecodeError, GenerationError
from app.engine.pipeline import Pipeline, create_pipeline, generate_variants

__all__ = [
    "stage",
    "Phase",
    "get_registry",
    "RenderContext",
    "PlacedBlock",
    "CaptionBox",
    "DecodeError",
    "GenerationError",
    "Pipeline",
    "create_pipeline",
    "generate_variants",
]
