"""Logging utilities for jira_cloud.

The library only creates named loggers; the CLI calls `setup_logging` to
attach a handler. Credentials pass through `mask_sensitive` before they are
logged.
"""

import logging

LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"

# Loggers whose level follows the CLI verbosity
JIRA_LOGGERS = ("jira-cloud", "jira-cloud.cli")


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Route log records to stderr at the given level.

    Replaces any handlers already installed on the root logger, so calling it
    twice does not duplicate output.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The top-level jira-cloud logger
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)

    for name in JIRA_LOGGERS:
        logging.getLogger(name).setLevel(level)
    # Connection pool chatter is only useful from INFO upwards
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))

    return logging.getLogger(JIRA_LOGGERS[0])


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Hide the middle of a secret, keeping `keep_chars` at each end.

    Secrets too short to keep both ends are masked entirely.
    """
    if not value:
        return "Not Provided"
    hidden = len(value) - 2 * keep_chars
    if hidden <= 0:
        return "*" * len(value)
    return value[:keep_chars] + "*" * hidden + value[-keep_chars:]


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log one configuration value at DEBUG, masking it if sensitive."""
    shown = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.debug(f"Jira {param}: {shown}")
