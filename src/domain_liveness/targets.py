"""Turning raw input lines into probe URLs and host names."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple
from urllib.parse import urlsplit

import idna

from .errors import ParseError
from .settings import COMMON_SECOND_LEVEL_TLDS

logger = logging.getLogger(__name__)

HTTP_SCHEMES = ("http", "https")


def read_targets(path: Path) -> List[str]:
    # Non-empty, trimmed lines in file order.
    targets = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                targets.append(line)
    return targets


def has_http_scheme(target: str) -> bool:
    scheme, sep, _ = target.partition("://")
    return bool(sep) and scheme.lower() in HTTP_SCHEMES


def to_ascii_host(hostname: str) -> str:
    """Return the punycode form of ``hostname`` suitable for DNS and WHOIS.

    Raises ParseError when the name is empty or not a valid IDNA name.
    """
    cleaned = hostname.strip().rstrip(".")
    if not cleaned:
        raise ParseError("empty host")
    try:
        return idna.encode(cleaned, uts46=True).decode("ascii")
    except (idna.IDNAError, UnicodeError) as exc:
        raise ParseError(f"invalid host {hostname!r}: {exc}") from exc


def extract_host(probe_url: str) -> str:
    try:
        parts = urlsplit(probe_url)
        # .port validates the netloc and raises on garbage like "host:abc"
        parts.port
    except ValueError as exc:
        raise ParseError(f"unparseable URL {probe_url!r}: {exc}") from exc
    if not parts.hostname:
        raise ParseError(f"no host in {probe_url!r}")
    return to_ascii_host(parts.hostname)


def normalize(target: str) -> Tuple[str, Optional[str]]:
    """Return ``(probe_url, host)`` for one input line.

    Full http(s) URLs are probed unchanged; anything else is probed as
    ``http://<target>``. ``host`` is None when no usable host name can be
    derived, which tells the classifier to skip DNS and WHOIS.
    """
    probe_url = target if has_http_scheme(target) else f"http://{target}"
    try:
        host = extract_host(probe_url)
    except ParseError as exc:
        logger.debug("No host for %s: %s", target, exc)
        host = None
    return probe_url, host


def whois_domain(host: str) -> str:
    """Name to ask a WHOIS server about for ``host``.

    Registries only know registered names, so subdomains are cut back to the
    last two labels, or three under a ``co.uk``-style suffix.
    """
    labels = [label for label in host.strip(".").split(".") if label]
    keep = 2
    if len(labels) >= 3 and len(labels[-1]) == 2 and labels[-2] in COMMON_SECOND_LEVEL_TLDS:
        keep = 3
    return ".".join(labels[-keep:])
