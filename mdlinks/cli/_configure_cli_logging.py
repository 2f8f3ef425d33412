"""Logging setup for one CLI process."""

from mdlinks.api.config.MdlinksConfig import MdlinksConfig
from mdlinks.utils.configure_logging import configure_logging


def _configure_cli_logging() -> None:
    """Log to the home directory at the configured level, INFO without a usable config.

    A broken config is reported by the command that loads it, not here.
    """
    try:
        level = MdlinksConfig.load().log.level
    except ValueError:
        level = "INFO"
    configure_logging(level=level)
