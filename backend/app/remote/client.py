"""Remote generation backend client (httpx).

Alternative to the local compositor: the same request fields go to
``{api_base}/generate`` as multipart form data and the service answers with
``{"images": [...]}``.
"""

from __future__ import annotations

import logging

import httpx

from app.engine.errors import BackendHTTPError, ConfigError, TransportError
from app.models.requests import GenerationRequest

logger = logging.getLogger(__name__)


def _budget_field(budget: float) -> str:
    """300000.0 -> "300000", 1.5 -> "1.5"."""
    value = float(budget)
    return str(int(value)) if value.is_integer() else str(value)


def build_form_fields(request: GenerationRequest) -> dict[str, str]:
    return {
        "roomType": request.room_category.value,
        "theme": request.theme.value,
        "palette": request.palette.value,
        "budget": _budget_field(request.budget),
        "notes": request.notes or "",
    }


class BackendAdapter:
    """Talks to a real generation service; never composed with the local pipeline."""

    def __init__(
        self,
        api_base: str,
        api_key: str = "",
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_base = (api_base or "").strip()
        self.api_key = (api_key or "").strip()
        self.timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        if not self.api_base:
            raise ConfigError("Set API Base in Settings")
        return f"{self.api_base.rstrip('/')}/generate"

    async def generate(
        self,
        request: GenerationRequest,
        image_bytes: bytes,
        filename: str = "upload.png",
        content_type: str = "application/octet-stream",
    ) -> list[str]:
        """POST the request; returns the service's ``images`` list."""
        url = self.endpoint
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
        files = {"image": (filename, image_bytes, content_type)}

        logger.info("Backend generate: POST %s (%d bytes)", url, len(image_bytes))
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as c:
                r = await c.post(url, headers=headers, data=build_form_fields(request), files=files)
        except httpx.HTTPError as e:
            raise TransportError(f"Backend unreachable: {e}") from e

        if not r.is_success:
            logger.warning("Backend generate failed with HTTP %d", r.status_code)
            raise BackendHTTPError(r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise TransportError(f"Backend returned invalid JSON: {e}") from e
        images = data.get("images") if isinstance(data, dict) else None
        if images is None:
            return []
        if not isinstance(images, list) or not all(isinstance(ref, str) for ref in images):
            raise TransportError("Backend returned malformed images")
        return images
