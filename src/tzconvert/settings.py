"""Environment-driven settings and one-time logging setup for the entry points.

Values are read from the process environment after load_dotenv() has run.
"""

import logging
import os

DEFAULT_SOURCE_LABEL = "New York, United States"

_LOGGING_CONFIGURED = False


def default_source_label() -> str:
    """Catalogue label of the city preselected as source."""
    return os.environ.get("TZCONVERT_DEFAULT_SOURCE") or DEFAULT_SOURCE_LABEL


def log_level() -> int:
    """Logging level from TZCONVERT_LOG_LEVEL (name, e.g. "DEBUG"). Defaults to INFO."""
    name = os.environ.get("TZCONVERT_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: int | None = None) -> None:
    """Configure logging once. Later calls are no-ops."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(
        level=log_level() if level is None else level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _LOGGING_CONFIGURED = True
