"""Links configuration for one command invocation."""

from ..config.LinksConfig import LinksConfig
from ..config.MdlinksConfig import MdlinksConfig


def _load_links_config(dataset_root: str | None = None) -> LinksConfig:
    """Load the links section, overriding dataset_root when given.

    Raises:
        ValueError: If the configuration cannot be loaded or validated
    """
    return MdlinksConfig.load().with_dataset_root(dataset_root)
