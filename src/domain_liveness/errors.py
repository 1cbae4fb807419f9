"""Failures raised inside the probers.

Probers raise these internally and turn them into ``ProbeOutcome`` failures
before returning, so none of them ever reaches the executor.
"""


class ProbeError(Exception):
    """Base class for a single failed network check."""


class TransportError(ProbeError):
    """HTTP connection, timeout, redirect or TLS failure."""


class ResolutionError(ProbeError):
    """DNS lookup failed (NXDOMAIN, timeout, no nameservers)."""


class RegistrationLookupError(ProbeError):
    """WHOIS server unknown, unreachable, or returned nothing."""


class ParseError(ProbeError):
    """A target could not be turned into a host name."""
