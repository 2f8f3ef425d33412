"""Top-level mdlinks configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_home_dir import get_home_dir
from .LinksConfig import LinksConfig
from .LogConfig import LogConfig


class MdlinksConfig(BaseModel):
    """Top-level configuration for mdlinks."""

    model_config = ConfigDict(extra="forbid")

    links: LinksConfig
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on MDLINKS_HOME or default to ~/.mdlinks."""
        return get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "MdlinksConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: top level of {path} must be an object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert MdlinksConfig instance to a dictionary for serialization."""
        return {
            "links": self.links.model_dump(),
            "log": self.log.model_dump(),
        }

    def with_dataset_root(self, dataset_root: str | None) -> LinksConfig:
        """Links section, with dataset_root overridden when one is given."""
        if not dataset_root:
            return self.links
        return LinksConfig(**{**self.links.model_dump(), "dataset_root": dataset_root})
