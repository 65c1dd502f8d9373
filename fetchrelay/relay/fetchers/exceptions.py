"""Custom exceptions for the fetch module."""

from __future__ import annotations


class FetchError(Exception):
    """An outbound fetch did not produce a terminal response."""

    def __init__(self, message: str, url: str):
        self.url = url
        super().__init__(message)


class FetchTimeout(FetchError):
    """A hop did not complete within the configured timeout."""


class TransportError(FetchError):
    """Connection or protocol failure below HTTP."""


class RedirectLoopError(FetchError):
    """The redirect budget ran out before a non-redirect response arrived."""

    def __init__(self, message: str, url: str, hops: list[str] | None = None):
        self.hops = hops or []
        super().__init__(message, url)


class RedirectTargetError(FetchError):
    """A redirect pointed somewhere the fetcher will not follow."""

    def __init__(self, message: str, url: str, location: str):
        self.location = location
        super().__init__(message, url)
