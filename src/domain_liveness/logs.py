import logging
import re
from typing import Optional

from colorama import Fore, Style, init

from .models import Verdict

VERBOSE_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}

VERDICT_COLORS = {
    Verdict.ACTIVE: Fore.GREEN,
    Verdict.INACTIVE: Fore.RED,
}

ANSI_ESCAPE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")

# Result lines stay uncolored apart from the verdict itself
CONSOLE_LEVEL_COLORS = {
    logging.DEBUG: Fore.CYAN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.MAGENTA,
}


class PlainFileFormatter(logging.Formatter):
    """Log file lines without the verdict and level colors."""

    def format(self, record):
        return ANSI_ESCAPE.sub("", super().format(record))


class ConsoleFormatter(logging.Formatter):
    def format(self, record):
        message = super().format(record)
        color = CONSOLE_LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{Style.RESET_ALL}"


def color_verdict(verdict: Verdict) -> str:
    return f"{Style.BRIGHT}{VERDICT_COLORS[verdict]}{verdict.value}{Style.RESET_ALL}"


_colorama_ready = False


def configure_logging(verbose_level: int = 1, log_file: Optional[str] = None) -> logging.Logger:
    # Colored console output plus an optional plain-text file log.
    global _colorama_ready
    if not _colorama_ready:
        init()
        _colorama_ready = True

    console_level = VERBOSE_LEVELS.get(verbose_level, logging.DEBUG if verbose_level > 2 else logging.WARNING)

    logger = logging.getLogger("domain_liveness")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(ConsoleFormatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(PlainFileFormatter("%(asctime)s - %(levelname)s - %(message)s"))
        logger.addHandler(file_handler)

    return logger
