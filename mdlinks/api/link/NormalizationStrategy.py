"""Normalization strategy variants, evaluated in declaration order."""

from enum import Enum


class NormalizationStrategy(str, Enum):
    # Target sits in or below the host file's directory: shortest relative path
    RELATIVE = "relative"
    # Target sits directly at the dataset root: bare filename
    SINGLE_FILE = "singleFile"
    # Target deeper in the dataset: docs-folder rooted path. Always declines:
    # such paths are not navigable from editors or repository hosts and break
    # links once content is redistributed.
    FULL = "full"
