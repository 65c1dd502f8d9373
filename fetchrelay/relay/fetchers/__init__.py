"""Outbound fetch module: one GET per hop, bounded redirects, per-hop timeout."""

from .base import FetchResult
from .exceptions import (
    FetchError,
    FetchTimeout,
    RedirectLoopError,
    RedirectTargetError,
    TransportError,
)
from .http_fetcher import HttpFetcher

__all__ = [
    "HttpFetcher",
    "FetchResult",
    "FetchError",
    "FetchTimeout",
    "TransportError",
    "RedirectLoopError",
    "RedirectTargetError",
]
