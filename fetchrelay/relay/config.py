"""Runtime relay settings, read from Django settings once at app start-up."""

from __future__ import annotations

from dataclasses import dataclass

from relay.allowlist import AllowlistConfig


@dataclass(frozen=True)
class RelaySettings:
    allowlist: AllowlistConfig
    fetch_timeout: float
    max_redirects: int
    user_agent: str
    archive_url: str
    document_url_template: str
    archive_scanner: str

    @classmethod
    def from_django_settings(cls, settings) -> RelaySettings:
        return cls(
            allowlist=AllowlistConfig(
                enforced=settings.RELAY_ENFORCE_ALLOWLIST,
                hosts=frozenset(settings.RELAY_ALLOWED_DOMAINS),
            ),
            fetch_timeout=float(settings.RELAY_FETCH_TIMEOUT),
            max_redirects=int(settings.RELAY_MAX_REDIRECTS),
            user_agent=settings.RELAY_USER_AGENT,
            archive_url=settings.ARCHIVE_URL,
            document_url_template=settings.ARCHIVE_DOCUMENT_URL_TEMPLATE,
            archive_scanner=settings.ARCHIVE_SCANNER,
        )
