"""Error taxonomy for variant generation.

The local compositor only ever fails with DecodeError. The remaining classes
belong to the remote generation backend path.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class: one human-readable message per failed generation call."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DecodeError(GenerationError):
    """Source bytes could not be rasterized (corrupt, unsupported, or empty)."""


class ConfigError(GenerationError):
    """Backend path selected without the configuration it needs."""


class TransportError(GenerationError):
    """Network failure talking to the generation backend."""


class BackendHTTPError(GenerationError):
    """Generation backend answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"API {status_code}")
        self.status_code = status_code
