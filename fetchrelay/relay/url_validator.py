"""Target URL parsing for the relay.

Turns an untrusted ``url`` query value into a :class:`TargetURL`:
- Percent-escapes unsafe characters (spaces, non-ASCII) with w3lib
- Accepts only the http and https schemes, case-insensitively
- Requires a host and a well-formed port
- Drops the fragment, keeps path and query
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from w3lib.url import safe_url_string

ALLOWED_SCHEMES = ("http", "https")


class InvalidURL(ValueError):
    """The candidate string is not a usable http(s) URL."""

    def __init__(self, message: str, raw: str):
        self.raw = raw
        super().__init__(message)


@dataclass(frozen=True)
class TargetURL:
    """A parsed, scheme-checked target."""

    scheme: str
    host: str
    port: int | None
    path: str

    @property
    def netloc(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port is None:
            return host
        return f"{host}:{self.port}"

    @property
    def url(self) -> str:
        return f"{self.scheme}://{self.netloc}{self.path}"

    def __str__(self) -> str:
        return self.url


def validate_url(raw: str) -> TargetURL:
    """Parse *raw* into a :class:`TargetURL`.

    Args:
        raw: The candidate URL string, usually straight from a query parameter.

    Returns:
        The parsed target.

    Raises:
        InvalidURL: If the string does not parse, has no host, carries an
            invalid port, or uses a scheme other than http/https.
    """
    if not raw or not isinstance(raw, str):
        raise InvalidURL("Empty URL", raw)

    try:
        parts = urlsplit(safe_url_string(raw.strip()))
        port = parts.port
    except ValueError as exc:
        raise InvalidURL(f"Unparseable URL: {exc}", raw) from exc

    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_SCHEMES:
        raise InvalidURL(f"Invalid scheme: {parts.scheme or '(none)'}", raw)

    if not parts.hostname:
        raise InvalidURL("URL has no host", raw)

    path = parts.path or "/"
    if parts.query:
        path = f"{path}?{parts.query}"

    return TargetURL(scheme=scheme, host=parts.hostname, port=port, path=path)
