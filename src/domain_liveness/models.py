from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Verdict(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

    def __str__(self) -> str:
        return self.value


class StatusCategory(str, Enum):
    """How an HTTP probe result reads for liveness."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    AMBIGUOUS = "ambiguous"
    ERROR = "error"


def parse_exclusion(value: Optional[str]) -> Optional[Verdict]:
    """Turn the ``exclude`` setting into a Verdict, or None for "keep both".

    Raises ValueError for anything other than "", ACTIVE or INACTIVE.
    """
    if value is None:
        return None
    cleaned = value.strip().upper()
    if not cleaned:
        return None
    try:
        return Verdict(cleaned)
    except ValueError:
        raise ValueError(f"exclude must be ACTIVE, INACTIVE or empty, got {value!r}") from None


@dataclass(frozen=True)
class ProbeOutcome:
    ok: bool
    reason: Optional[str] = None

    @classmethod
    def success(cls) -> "ProbeOutcome":
        return cls(True)

    @classmethod
    def failure(cls, reason: str) -> "ProbeOutcome":
        return cls(False, reason)


@dataclass(frozen=True)
class HttpOutcome:
    is_active: bool
    redirected_to_www: bool
    status: Optional[int] = None
    category: StatusCategory = StatusCategory.AMBIGUOUS
    final_url: Optional[str] = None
    reason: Optional[str] = None

    @property
    def is_live(self) -> bool:
        return self.is_active or self.redirected_to_www

    @classmethod
    def failed(cls, reason: str) -> "HttpOutcome":
        return cls(False, False, category=StatusCategory.ERROR, reason=reason)
