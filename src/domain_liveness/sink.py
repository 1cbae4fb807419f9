"""Status-partitioned output files."""

import logging
from pathlib import Path
from typing import Dict, Optional

from .models import Verdict

logger = logging.getLogger(__name__)


class ResultSink:
    """Appends each target to ``<prefix>_ACTIVE.txt`` or ``<prefix>_INACTIVE.txt``.

    Every write is its own open-append-close with no await in between, so
    lines from concurrent workflows never interleave.
    """

    def __init__(self, output_prefix):
        self.output_prefix = str(output_prefix)

    def path_for(self, verdict: Verdict) -> Path:
        return Path(f"{self.output_prefix}_{verdict.value}.txt")

    @property
    def paths(self) -> Dict[Verdict, Path]:
        return {verdict: self.path_for(verdict) for verdict in Verdict}

    def reset(self) -> None:
        # Start each run from empty files so reruns do not accumulate.
        for path in self.paths.values():
            if path.exists():
                path.unlink()
                logger.debug("Removed old output file %s", path)

    def record(self, target: str, verdict: Verdict, exclude: Optional[Verdict] = None) -> bool:
        """Write ``target`` to its verdict file; return False if excluded."""
        if verdict is exclude:
            return False
        with open(self.path_for(verdict), "a", encoding="utf-8") as f:
            f.write(target + "\n")
        return True
