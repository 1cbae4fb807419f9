"""Per-target decision procedure combining the HTTP, DNS and WHOIS probes."""

import logging
from enum import Enum

from .models import Verdict
from .targets import normalize

logger = logging.getLogger(__name__)


class State(Enum):
    START = "start"
    AWAITING_HTTP = "awaiting_http"
    AWAITING_DNS = "awaiting_dns"
    AWAITING_WHOIS = "awaiting_whois"
    ACTIVE_FINAL = "active_final"
    INACTIVE_FINAL = "inactive_final"


FINAL_VERDICTS = {
    State.ACTIVE_FINAL: Verdict.ACTIVE,
    State.INACTIVE_FINAL: Verdict.INACTIVE,
}


class Classifier:
    """Runs the probe cascade for one target and returns its Verdict.

    HTTP decides first. Only when it gives no liveness signal does the
    classifier fall back to DNS, and only a resolving host is sent on to
    WHOIS. With ``require_whois=False`` a resolving host is enough.

    The classifier keeps no per-target state between calls, so one
    instance is shared by every concurrent workflow.
    """

    def __init__(self, http_prober, dns_prober, whois_prober, require_whois: bool = True):
        self.http = http_prober
        self.dns = dns_prober
        self.whois = whois_prober
        self.require_whois = require_whois

    def _enter(self, target: str, state: State) -> State:
        logger.debug("%s -> %s", target, state.value)
        return state

    async def run(self, target: str) -> State:
        """Drive one target from START to a final state."""
        self._enter(target, State.START)
        probe_url, host = normalize(target)

        self._enter(target, State.AWAITING_HTTP)
        http = await self.http.probe(probe_url)
        if http.is_live:
            return self._enter(target, State.ACTIVE_FINAL)
        if host is None:
            logger.debug("%s: no host to resolve, skipping DNS and WHOIS", target)
            return self._enter(target, State.INACTIVE_FINAL)

        self._enter(target, State.AWAITING_DNS)
        resolved = await self.dns.probe(host)
        if not resolved.ok:
            return self._enter(target, State.INACTIVE_FINAL)
        if not self.require_whois:
            return self._enter(target, State.ACTIVE_FINAL)

        self._enter(target, State.AWAITING_WHOIS)
        registered = await self.whois.probe(host)
        return self._enter(target, State.ACTIVE_FINAL if registered.ok else State.INACTIVE_FINAL)

    async def classify(self, target: str) -> Verdict:
        return FINAL_VERDICTS[await self.run(target)]
