"""DNS resolvability check using the system resolver configuration."""

import ipaddress
import logging
from typing import Optional

import dns.asyncresolver
import dns.exception
import dns.resolver

from .errors import ResolutionError
from .models import ProbeOutcome
from .settings import DNS_TIMEOUT

logger = logging.getLogger(__name__)


def is_ip_literal(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


class DnsProber:
    def __init__(self, resolver: Optional[dns.asyncresolver.Resolver] = None, timeout: float = DNS_TIMEOUT):
        self._resolver = resolver
        self.timeout = timeout

    def _get_resolver(self) -> dns.asyncresolver.Resolver:
        # Built lazily so a broken resolv.conf fails probes, not startup.
        if self._resolver is None:
            try:
                self._resolver = dns.asyncresolver.Resolver()
            except dns.exception.DNSException as exc:
                raise ResolutionError(f"no resolver configuration: {exc}") from exc
        return self._resolver

    async def _resolve(self, host: str) -> None:
        resolver = self._get_resolver()
        try:
            # An empty answer still means the name exists
            await resolver.resolve(host, "A", lifetime=self.timeout, raise_on_no_answer=False)
        except dns.resolver.NXDOMAIN as exc:
            raise ResolutionError(f"NXDOMAIN: {host}") from exc
        except dns.exception.Timeout as exc:
            raise ResolutionError(f"timed out after {self.timeout}s") from exc
        except dns.exception.DNSException as exc:
            raise ResolutionError(f"{type(exc).__name__}: {str(exc)[:80]}") from exc

    async def probe(self, host: str) -> ProbeOutcome:
        if is_ip_literal(host):
            logger.debug("DNS Lookup for %s skipped: IP address", host)
            return ProbeOutcome.success()
        try:
            await self._resolve(host)
        except ResolutionError as exc:
            logger.debug("DNS Lookup for %s failed: %s", host, exc)
            return ProbeOutcome.failure(str(exc))
        logger.debug("DNS Lookup for %s succeeded", host)
        return ProbeOutcome.success()
