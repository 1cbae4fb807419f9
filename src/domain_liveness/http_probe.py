"""HTTP liveness probe built on a shared aiohttp session."""

import asyncio
import logging
from typing import Optional

import aiohttp

from .errors import TransportError
from .models import HttpOutcome, StatusCategory
from .settings import (
    ACTIVE_CODES,
    CONNECTOR_LIMIT,
    DEFAULT_HEADERS,
    HTTP_TIMEOUT,
    INACTIVE_CODES,
    MAX_REDIRECTS,
    WWW_PREFIX,
)

logger = logging.getLogger(__name__)


def classify_status(status: int) -> StatusCategory:
    # Active table wins for codes listed in both (410).
    if status in ACTIVE_CODES:
        return StatusCategory.ACTIVE
    if status in INACTIVE_CODES:
        return StatusCategory.INACTIVE
    return StatusCategory.AMBIGUOUS


def is_www_host(host: Optional[str]) -> bool:
    return bool(host) and host.lower().startswith(WWW_PREFIX)


class HttpProber:
    """Issues one GET per target and reports whether the site answered.

    Use as an async context manager so the session is opened and closed on
    the running loop. An externally created session can be passed in; it is
    then left open on exit.
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: float = HTTP_TIMEOUT,
        max_redirects: int = MAX_REDIRECTS,
        connector_limit: int = CONNECTOR_LIMIT,
    ):
        self._session = session
        self._owns_session = session is None
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.connector_limit = connector_limit

    async def __aenter__(self):
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers=DEFAULT_HEADERS,
                connector=aiohttp.TCPConnector(limit=self.connector_limit, enable_cleanup_closed=True),
            )
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def _fetch(self, url: str) -> HttpOutcome:
        if self._session is None:
            raise RuntimeError("HttpProber used outside of 'async with'")
        try:
            async with self._session.get(
                url, allow_redirects=True, max_redirects=self.max_redirects
            ) as resp:
                status = resp.status
                final_url = resp.url
        except aiohttp.TooManyRedirects as exc:
            raise TransportError(f"more than {self.max_redirects} redirects") from exc
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError, OSError) as exc:
            raise TransportError(f"{type(exc).__name__}: {str(exc)[:80]}") from exc

        category = classify_status(status)
        return HttpOutcome(
            is_active=category is StatusCategory.ACTIVE,
            redirected_to_www=is_www_host(final_url.host),
            status=status,
            category=category,
            final_url=str(final_url),
        )

    async def probe(self, url: str) -> HttpOutcome:
        try:
            outcome = await self._fetch(url)
        except TransportError as exc:
            logger.debug("HTTP check for %s failed: %s", url, exc)
            return HttpOutcome.failed(str(exc))

        if outcome.category is StatusCategory.ACTIVE:
            logger.debug("HTTP check for %s succeeded with status code %s", url, outcome.status)
        elif outcome.category is StatusCategory.INACTIVE:
            logger.debug("HTTP check for %s failed with status code %s", url, outcome.status)
        else:
            logger.debug("HTTP check for %s returned status code %s", url, outcome.status)
        if outcome.redirected_to_www:
            logger.debug("Redirected to www: %s", outcome.final_url)
        return outcome
