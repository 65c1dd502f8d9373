"""HttpFetcher: plain GET with manual, bounded redirect following."""

from __future__ import annotations

import time
from urllib.parse import urljoin

import requests
from loguru import logger
from urllib3.exceptions import HTTPError as URLLib3Error
from urllib3.exceptions import ReadTimeoutError
from urllib3.util import Timeout

from relay.url_validator import InvalidURL, TargetURL, validate_url

from .base import DEFAULT_CONTENT_TYPE, FetchResult
from .exceptions import (
    FetchTimeout,
    RedirectLoopError,
    RedirectTargetError,
    TransportError,
)

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; ShootingDashboardProxy/1.0)"

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})

CHUNK_SIZE = 64 * 1024


class HttpFetcher:
    """Fetcher that follows redirects itself so every hop is counted and re-validated.

    The timeout applies to each hop separately: connect, response headers and
    body of one request must all finish within ``timeout`` seconds of that
    request starting.
    """

    def __init__(
        self,
        timeout: float = 20.0,
        max_redirects: int = 5,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.user_agent = user_agent

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": "*/*"}

    def fetch(
        self,
        target: TargetURL,
        timeout: float | None = None,
        max_redirects: int | None = None,
    ) -> FetchResult:
        """Fetch *target*, following up to ``max_redirects`` redirects.

        Raises FetchTimeout, TransportError, RedirectLoopError or
        RedirectTargetError; all are FetchError subclasses.
        """
        timeout = self.timeout if timeout is None else timeout
        budget = self.max_redirects if max_redirects is None else max_redirects
        remaining = budget

        current = target
        hops: list[str] = []

        while True:
            deadline = time.monotonic() + timeout
            response = self._send(current, timeout)
            hops.append(current.url)

            location = response.headers.get("location")
            if response.status_code not in REDIRECT_STATUSES or not location:
                return self._read(current, response, deadline)

            response.close()
            if remaining <= 0:
                raise RedirectLoopError(
                    f"Too many redirects (limit {budget})",
                    url=target.url,
                    hops=hops,
                )

            next_target = self._resolve_redirect(current, location)
            logger.debug(
                f"Redirect {response.status_code} from {current.url} to {next_target.url}"
            )
            current = next_target
            remaining -= 1

    def _send(self, target: TargetURL, timeout: float) -> requests.Response:
        # total= makes the wait for response headers share the budget left
        # after connecting, instead of getting a fresh ``timeout`` of its own.
        try:
            return requests.get(
                target.url,
                headers=self.headers,
                timeout=Timeout(total=timeout),
                allow_redirects=False,
                stream=True,
            )
        except requests.Timeout as exc:
            raise FetchTimeout(
                f"Request timed out after {timeout}s", url=target.url
            ) from exc
        except requests.RequestException as exc:
            raise TransportError(f"Connection failed: {exc}", url=target.url) from exc

    def _read(
        self, target: TargetURL, response: requests.Response, deadline: float
    ) -> FetchResult:
        """Drain the body into memory without outliving the hop deadline.

        Every read waits at most for the time left until ``deadline`` and
        returns as soon as any bytes arrive, so a trickling upstream is cut off
        on schedule rather than after the next full chunk.
        """
        chunks: list[bytes] = []
        try:
            while True:
                left = deadline - time.monotonic()
                if left <= 0:
                    raise FetchTimeout("Request timed out reading body", url=target.url)
                _set_read_timeout(response, left)
                chunk = response.raw.read1(CHUNK_SIZE, decode_content=True)
                if not chunk:
                    break
                chunks.append(chunk)
        except (requests.RequestException, URLLib3Error, OSError) as exc:
            timed_out = isinstance(exc, (requests.Timeout, ReadTimeoutError, TimeoutError))
            if timed_out or time.monotonic() >= deadline:
                raise FetchTimeout(
                    "Request timed out reading body", url=target.url
                ) from exc
            raise TransportError(f"Error reading body: {exc}", url=target.url) from exc
        finally:
            response.close()

        return FetchResult(
            status_code=response.status_code,
            content_type=response.headers.get("content-type") or DEFAULT_CONTENT_TYPE,
            body=b"".join(chunks),
            url=target.url,
        )

    def _resolve_redirect(self, current: TargetURL, location: str) -> TargetURL:
        try:
            return validate_url(urljoin(current.url, location.strip()))
        except (InvalidURL, ValueError) as exc:
            raise RedirectTargetError(
                f"Refusing redirect to {location}: {exc}",
                url=current.url,
                location=location,
            ) from exc


def _set_read_timeout(response: requests.Response, seconds: float) -> None:
    # The connection is detached once the body is fully read.
    connection = getattr(response.raw, "connection", None)
    sock = getattr(connection, "sock", None)
    if sock is not None:
        sock.settimeout(seconds)
