"""Durham archive scraping: find the newest ADID on the archive page.

The archive page lists documents as links like ``Archive.aspx?ADID=7421``.
Identifiers grow over time, so the largest one on the page is the newest
document. Scanning is a heuristic tied to that page's markup and is kept
behind a scanner callable so it can be replaced without touching the fetcher.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import TYPE_CHECKING, Callable
from urllib.parse import parse_qs, urlsplit

from loguru import logger

from relay.url_validator import validate_url

if TYPE_CHECKING:
    from relay.config import RelaySettings
    from relay.fetchers import HttpFetcher

ADID_PATTERN = re.compile(r"ADID=(\d+)")

Scanner = Callable[[str], list[int]]


class ExtractionError(Exception):
    """The archive page could not be turned into a document URL."""


class UpstreamError(ExtractionError):
    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class NoIdentifiersFoundError(ExtractionError):
    pass


@dataclass(frozen=True)
class DurhamResult:
    identifier: int
    document_url: str

    def as_dict(self) -> dict:
        return {"adid": self.identifier, "pdfUrl": self.document_url}


# ---------------------------------------------------------------------------
# Scanners
# ---------------------------------------------------------------------------


def scan_text(html: str) -> list[int]:
    """Every ``ADID=<digits>`` occurrence anywhere in the page."""
    return [int(match) for match in ADID_PATTERN.findall(html)]


class AnchorIdentifierParser(HTMLParser):
    """Collect ADID query values from ``<a href>`` attributes only."""

    def __init__(self) -> None:
        super().__init__()
        self.identifiers: list[int] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag != "a":
            return
        href = dict(attrs).get("href") or ""
        for value in parse_qs(urlsplit(href).query).get("ADID", []):
            if value.isdecimal():
                self.identifiers.append(int(value))


def scan_anchors(html: str) -> list[int]:
    parser = AnchorIdentifierParser()
    parser.feed(html)
    parser.close()
    return parser.identifiers


SCANNERS: dict[str, Scanner] = {
    "regex": scan_text,
    "anchors": scan_anchors,
}


# ---------------------------------------------------------------------------
# Extractor
# ---------------------------------------------------------------------------


class ArchiveExtractor:
    """Fetches the archive page and derives the newest document URL."""

    def __init__(
        self,
        fetcher: HttpFetcher,
        archive_url: str,
        document_url_template: str,
        scanner: Scanner = scan_text,
    ):
        self.fetcher = fetcher
        self.archive_url = archive_url
        self.document_url_template = document_url_template
        self.scanner = scanner

    @classmethod
    def from_settings(cls, fetcher: HttpFetcher, settings: RelaySettings) -> ArchiveExtractor:
        try:
            scanner = SCANNERS[settings.archive_scanner]
        except KeyError:
            raise ValueError(
                f"Unknown ARCHIVE_SCANNER {settings.archive_scanner!r}, "
                f"expected one of {sorted(SCANNERS)}"
            ) from None
        return cls(
            fetcher,
            archive_url=settings.archive_url,
            document_url_template=settings.document_url_template,
            scanner=scanner,
        )

    def get_latest_document(self) -> DurhamResult:
        """Return the newest ADID and its direct document URL.

        Raises:
            FetchError: If the archive page could not be fetched at all.
            UpstreamError: If the archive page did not answer 200.
            NoIdentifiersFoundError: If the page holds no ADID links.
        """
        result = self.fetcher.fetch(validate_url(self.archive_url))

        if result.status_code != 200:
            raise UpstreamError(
                f"Archive page returned HTTP {result.status_code}",
                status_code=result.status_code,
            )

        identifiers = self.scanner(result.text)
        if not identifiers:
            raise NoIdentifiersFoundError("No ADID links found in archive page HTML")

        latest = max(identifiers)
        logger.info(f"Archive {self.archive_url}: {len(identifiers)} ADIDs, latest {latest}")
        return DurhamResult(
            identifier=latest,
            document_url=self.document_url_template.format(adid=latest),
        )
