"""Config API module."""

from .LinksConfig import LinksConfig
from .LogConfig import LogConfig
from .MdlinksConfig import MdlinksConfig

__all__ = ["LinksConfig", "LogConfig", "MdlinksConfig"]
