"""Error taxonomy shared by the pipeline and the HTTP layer."""

from __future__ import annotations

from typing import Optional


class BrandRadarError(Exception):
    """Base class for errors surfaced to callers."""
    pass


class ConfigurationError(BrandRadarError):
    """A required external credential is missing; the operation is not attempted."""
    pass


class UpstreamError(BrandRadarError):
    """A required external call failed."""

    def __init__(self, provider: str, message: str, status_code: Optional[int] = None):
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"{provider} error: {message}")
