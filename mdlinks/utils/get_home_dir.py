import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get mdlinks home directory based on MDLINKS_HOME or default to ~/.mdlinks."""
    env_home = os.environ.get("MDLINKS_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".mdlinks"
