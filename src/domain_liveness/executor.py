"""Bounded concurrent execution of the classifier over a target list."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from tqdm import tqdm

from .logs import color_verdict
from .models import Verdict
from .settings import DEFAULT_CONCURRENCY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TargetResult:
    target: str
    verdict: Optional[Verdict] = None
    written: bool = False
    error: Optional[str] = None


async def check_target(
    target: str,
    classifier,
    sink,
    semaphore: asyncio.Semaphore,
    exclude: Optional[Verdict] = None,
) -> TargetResult:
    """Classify and record one target while holding a worker slot.

    Unexpected failures are logged and returned as an error result with no
    verdict; nothing is written for such a target.
    """
    async with semaphore:
        logger.debug("Checking: %s", target)
        try:
            verdict = await classifier.classify(target)
            written = sink.record(target, verdict, exclude)
        except Exception as exc:
            logger.error("Error checking %s: %s: %s", target, type(exc).__name__, exc)
            return TargetResult(target, error=f"{type(exc).__name__}: {exc}")
        logger.info("%s: %s", target, color_verdict(verdict))
        logger.debug("Finished checking: %s", target)
        return TargetResult(target, verdict=verdict, written=written)


def new_stats() -> Dict[str, int]:
    return {"total": 0, "active": 0, "inactive": 0, "excluded": 0, "errors": 0}


def tally(stats: Dict[str, int], result: TargetResult) -> None:
    stats["total"] += 1
    if result.error is not None:
        stats["errors"] += 1
        return
    stats[result.verdict.value.lower()] += 1
    if not result.written:
        stats["excluded"] += 1


def summarize(results: Iterable[TargetResult]) -> Dict[str, int]:
    stats = new_stats()
    for result in results:
        tally(stats, result)
    return stats


def format_progress_description(stats: Dict[str, int]) -> str:
    return (
        f"Checking targets "
        f"(ACTIVE: {stats['active']:,}) "
        f"(INACTIVE: {stats['inactive']:,}) "
        f"(Errors: {stats['errors']:,})"
    )


async def run(
    targets: List[str],
    classifier,
    sink,
    concurrency: int = DEFAULT_CONCURRENCY,
    exclude: Optional[Verdict] = None,
    progress: bool = False,
) -> Dict[str, int]:
    """Classify every target with at most ``concurrency`` in flight.

    Returns per-run counts once every workflow has finished. Targets finish
    in whatever order their probes complete.
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be a positive integer, got {concurrency}")

    semaphore = asyncio.Semaphore(concurrency)
    tasks = [
        asyncio.create_task(check_target(target, classifier, sink, semaphore, exclude))
        for target in targets
    ]

    if not progress:
        return summarize(await asyncio.gather(*tasks))

    stats = new_stats()
    with tqdm(total=len(tasks), unit="target", dynamic_ncols=True, smoothing=0.05) as pbar:
        for finished in asyncio.as_completed(tasks):
            tally(stats, await finished)
            pbar.update(1)
            pbar.set_description(format_progress_description(stats), refresh=False)
    return stats
