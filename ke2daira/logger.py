import logging
import sys

from ke2daira.config import LOG_LEVEL

logger = logging.getLogger("ke2daira")
logger.setLevel(LOG_LEVEL)

# stdout carries the transformed names, so every record goes to stderr
stderr_handler = logging.StreamHandler(sys.stderr)

formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
stderr_handler.setFormatter(formatter)

logger.addHandler(stderr_handler)
logger.propagate = False


def set_level(level: str) -> None:
    """Change the level of the package logger (e.g. from a CLI flag)."""
    logger.setLevel(level.upper())
