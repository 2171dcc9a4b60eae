"""Console logging for the PR commit table CLI.

Everything is written to stderr; stdout is left for the tables themselves.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(log_level: str = "INFO", name: str = "pr_commit_table") -> logging.Logger:
    """
    Route all log records to stderr at the given level.

    Safe to call more than once: the CLI configures logging at import time
    with the default level and again once the configured level is known.

    Args:
        log_level: Level name, case-insensitive. Unknown names mean INFO.
        name: Name of the logger to return

    Returns:
        logging.Logger: The named logger, set to the same level
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    # force=True replaces the handler from any earlier call
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )

    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger
