import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Prevent multiple configurations
_state = {"configured": False}


def configure_logging(home: Path | None = None, level: str = "INFO") -> Path:
    """Configure unified mdlinks logging.

    Args:
        home: mdlinks home directory. If None, derived from environment.
        level: Level name for the ``mdlinks`` logger ("WARN" is accepted).

    Returns:
        Path to the logfile.
    """
    if home is None:
        home = get_home_dir()
    log_file = home / "mdlinks.log"

    root_logger = logging.getLogger("mdlinks")
    root_logger.setLevel("WARNING" if level.upper() == "WARN" else level.upper())
    if _state["configured"]:
        return log_file

    home.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(file_handler)

    _state["configured"] = True
    return log_file
