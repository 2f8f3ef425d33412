import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the ``mdlinks`` hierarchy.

    Handlers are installed by configure_logging at application entry; library
    callers get whatever their own logging setup provides.
    """
    return logging.getLogger(f"mdlinks.{name}")
