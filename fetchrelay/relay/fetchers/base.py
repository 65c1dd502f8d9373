"""Base types for the fetch module."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class FetchResult:
    """Terminal response of a fetch, after any redirects were followed."""

    status_code: int
    content_type: str
    body: bytes
    url: str

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")
