"""WHOIS registration lookup through python-whois.

The server is picked from a static TLD map; a TLD with no entry is a
failed lookup rather than a fatal error. ``NICClient`` is blocking, so each
query runs in the loop's default executor under its own timeout.
"""

import asyncio
import functools
import logging
from typing import Mapping, Optional

import whois

from .errors import RegistrationLookupError
from .models import ProbeOutcome
from .settings import WHOIS_SERVERS, WHOIS_TIMEOUT
from .targets import whois_domain

logger = logging.getLogger(__name__)

# NICClient hands back this text instead of raising when a socket fails
SOCKET_FAILURE_PREFIX = "Socket not responding"


class WhoisProber:
    def __init__(
        self,
        servers: Optional[Mapping[str, str]] = None,
        timeout: float = WHOIS_TIMEOUT,
        client: Optional[whois.NICClient] = None,
    ):
        self.servers = dict(WHOIS_SERVERS if servers is None else servers)
        self.timeout = timeout
        self.client = client or whois.NICClient()

    def server_for(self, domain: str) -> str:
        tld = domain.rstrip(".").rsplit(".", 1)[-1].lower()
        server = self.servers.get(tld)
        if not server:
            raise RegistrationLookupError("no server for TLD")
        return server

    async def query(self, server: str, domain: str) -> str:
        loop = asyncio.get_running_loop()
        call = functools.partial(
            self.client.whois,
            domain,
            server,
            0,
            timeout=self.timeout,
            ignore_socket_errors=False,
        )
        return await asyncio.wait_for(loop.run_in_executor(None, call), timeout=self.timeout)

    async def lookup(self, host: str) -> str:
        domain = whois_domain(host)
        server = self.server_for(domain)
        try:
            text = await self.query(server, domain)
        except asyncio.TimeoutError as exc:
            raise RegistrationLookupError(f"{server} timed out after {self.timeout}s") from exc
        except Exception as exc:
            raise RegistrationLookupError(f"{server}: {type(exc).__name__}: {str(exc)[:80]}") from exc
        if not text or not text.strip():
            raise RegistrationLookupError(f"{server} returned no data")
        if text.startswith(SOCKET_FAILURE_PREFIX):
            raise RegistrationLookupError(f"{server}: {text.strip()[:80]}")
        return text

    async def probe(self, host: str) -> ProbeOutcome:
        try:
            await self.lookup(host)
        except RegistrationLookupError as exc:
            logger.debug("WHOIS Lookup for %s failed: %s", host, exc)
            return ProbeOutcome.failure(str(exc))
        logger.debug("WHOIS Lookup for %s succeeded", host)
        return ProbeOutcome.success()
