"""POST /api/generate — three concept variants for an uploaded room photo."""

from __future__ import annotations

import asyncio
import logging
import time

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from app.config import Settings
from app.dependencies import get_backend_adapter, get_settings
from app.engine.codec import to_data_url
from app.engine.errors import BackendHTTPError, ConfigError, DecodeError, TransportError
from app.engine.pipeline import create_pipeline
from app.models.requests import GenerationMode, GenerationRequest, Palette, RoomCategory, Theme
from app.models.responses import GenerateResponse
from app.remote.client import BackendAdapter

router = APIRouter()
logger = logging.getLogger(__name__)


async def _run_local(req: GenerationRequest, data: bytes) -> list[str]:
    """Run the synchronous compositor in a worker thread; each call owns its buffers."""
    pipeline = create_pipeline()
    loop = asyncio.get_running_loop()
    try:
        variants = await loop.run_in_executor(None, pipeline.generate, req, data)
    except DecodeError as e:
        raise HTTPException(status_code=422, detail=e.message) from e
    return [to_data_url(png) for png in variants]


async def _run_backend(
    req: GenerationRequest,
    data: bytes,
    image: UploadFile,
    backend: BackendAdapter,
) -> list[str]:
    try:
        return await backend.generate(
            req,
            data,
            filename=image.filename or "upload.png",
            content_type=image.content_type or "application/octet-stream",
        )
    except ConfigError as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    except (BackendHTTPError, TransportError) as e:
        raise HTTPException(status_code=502, detail=e.message) from e


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    image: UploadFile = File(..., description="Room / space photo"),
    room_type: RoomCategory = Form(RoomCategory.LIVING_ROOM, alias="roomType"),
    theme: Theme = Form(Theme.MODERN),
    palette: Palette = Form(Palette.NEUTRAL),
    budget: float = Form(300000, ge=0, allow_inf_nan=False),
    notes: str = Form(""),
    mode: GenerationMode = Form(GenerationMode.MOCK),
    backend: BackendAdapter = Depends(get_backend_adapter),
    cfg: Settings = Depends(get_settings),
) -> GenerateResponse:
    start = time.perf_counter()

    too_large = HTTPException(status_code=413, detail=f"Image larger than {cfg.max_upload_mb:g} MB")
    # Declared size is known for spooled uploads; skip the read entirely
    if image.size is not None and image.size > cfg.max_upload_bytes:
        raise too_large
    data = await image.read()
    if len(data) > cfg.max_upload_bytes:
        raise too_large

    req = GenerationRequest(
        room_category=room_type,
        theme=theme,
        palette=palette,
        budget=budget,
        notes=notes,
    )

    if mode == GenerationMode.BACKEND:
        images = await _run_backend(req, data, image, backend)
    else:
        images = await _run_local(req, data)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Generated %d images (%s) in %.0fms", len(images), mode.value, elapsed)

    return GenerateResponse(
        images=images,
        mode=mode,
        processing_time_ms=round(elapsed, 1),
    )
