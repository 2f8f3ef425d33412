"""mdlinks - keep markdown cross-references valid as documents move."""

__version__ = "0.3.0"
