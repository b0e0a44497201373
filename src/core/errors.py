"""Error taxonomy for the roster scrape pipeline.

Only authentication and transport problems are exceptions. Gaps in page
structure degrade to empty values inside the parsers and never reach here.
"""

from __future__ import annotations
from typing import Any


class ScrapeError(Exception):
    """Base class for failures that abort a scrape run."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class AuthConfigError(ScrapeError):
    """Raised when credentials are missing; no request has been made."""


class AuthFailure(ScrapeError):
    """Raised when the site did not accept the submitted credentials."""


class TransportError(ScrapeError):
    """Raised on network errors, timeouts and non-2xx page responses."""
