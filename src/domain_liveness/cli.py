"""Command line entry point: ``domain-liveness -i targets.txt -o results``."""

import argparse
import asyncio
import logging
import time
from pathlib import Path
from typing import List, Optional

from . import executor
from .classifier import Classifier
from .dns_probe import DnsProber
from .http_probe import HttpProber
from .logs import configure_logging
from .models import parse_exclusion
from .settings import (
    CONNECTOR_LIMIT,
    DEFAULT_CONCURRENCY,
    DEFAULT_VERBOSE_LEVEL,
    DNS_TIMEOUT,
    HTTP_TIMEOUT,
    WHOIS_TIMEOUT,
)
from .sink import ResultSink
from .targets import read_targets
from .whois_probe import WhoisProber

logger = logging.getLogger("domain_liveness")


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def exclusion(value: str):
    try:
        return parse_exclusion(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Check a list of domains or URLs and sort them into ACTIVE and "
            "INACTIVE output files using HTTP, DNS and WHOIS probes."
        )
    )
    parser.add_argument(
        "-i", "--input-file",
        required=True,
        type=Path,
        help="File with one domain or URL per line.",
    )
    parser.add_argument(
        "-o", "--output-file",
        required=True,
        help="Output prefix; results go to <prefix>_ACTIVE.txt and <prefix>_INACTIVE.txt.",
    )
    parser.add_argument(
        "-e", "--exclude",
        type=exclusion,
        default=None,
        help="Do not write this category: ACTIVE or INACTIVE.",
    )
    parser.add_argument(
        "-c", "--concurrency",
        type=positive_int,
        default=DEFAULT_CONCURRENCY,
        help=f"Number of targets checked at once (default: {DEFAULT_CONCURRENCY}).",
    )
    parser.add_argument(
        "-v", "--verbose-level",
        type=int,
        default=DEFAULT_VERBOSE_LEVEL,
        help="0 = quiet, 1 = one result line per target, 2 = probe details.",
    )
    parser.add_argument("--http-timeout", type=float, default=HTTP_TIMEOUT, help="Seconds per HTTP request.")
    parser.add_argument("--dns-timeout", type=float, default=DNS_TIMEOUT, help="Seconds per DNS lookup.")
    parser.add_argument("--whois-timeout", type=float, default=WHOIS_TIMEOUT, help="Seconds per WHOIS query.")
    parser.add_argument(
        "--dns-only-fallback",
        action="store_true",
        help="Count a resolving host as ACTIVE without a WHOIS lookup.",
    )
    parser.add_argument("--progress", action="store_true", help="Show a progress bar.")
    parser.add_argument("--log-file", help="Also write a plain-text log to this file.")
    return parser.parse_args(argv)


def http_connector_limit(concurrency: int) -> int:
    # Pool waits count against the HTTP timeout, so every slot needs a connection.
    return max(concurrency, CONNECTOR_LIMIT)


async def check_all(targets: List[str], args: argparse.Namespace, sink: ResultSink):
    http_prober = HttpProber(timeout=args.http_timeout, connector_limit=http_connector_limit(args.concurrency))
    async with http_prober:
        classifier = Classifier(
            http_prober,
            DnsProber(timeout=args.dns_timeout),
            WhoisProber(timeout=args.whois_timeout),
            require_whois=not args.dns_only_fallback,
        )
        return await executor.run(
            targets,
            classifier,
            sink,
            concurrency=args.concurrency,
            exclude=args.exclude,
            progress=args.progress,
        )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    configure_logging(args.verbose_level, args.log_file)
    start_time = time.time()

    sink = ResultSink(args.output_file)
    try:
        sink.reset()
        targets = read_targets(args.input_file)
    except OSError as exc:
        logger.error("Cannot prepare run (%s): %s", args.input_file, exc)
        return 1

    logger.debug(
        "Loaded %d targets from %s, concurrency %d", len(targets), args.input_file, args.concurrency
    )

    try:
        stats = asyncio.run(check_all(targets, args, sink))
    except KeyboardInterrupt:
        logger.warning("Process interrupted by user")
        return 130

    elapsed_time = time.time() - start_time
    logger.info("All tasks completed.")
    logger.debug(
        "Checked %d targets in %.2f seconds: %d active, %d inactive, %d excluded, %d errors",
        stats["total"], elapsed_time, stats["active"], stats["inactive"], stats["excluded"], stats["errors"],
    )
    for verdict, path in sink.paths.items():
        if verdict is not args.exclude:
            logger.debug("%s results: %s", verdict.value, path)
    return 0
