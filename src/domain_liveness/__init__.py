"""Sort domains and URLs into ACTIVE and INACTIVE lists."""

from .classifier import Classifier, State
from .models import HttpOutcome, ProbeOutcome, Verdict, parse_exclusion
from .sink import ResultSink

__version__ = "0.1.0"

__all__ = [
    "Classifier",
    "HttpOutcome",
    "ProbeOutcome",
    "ResultSink",
    "State",
    "Verdict",
    "parse_exclusion",
    "__version__",
]
