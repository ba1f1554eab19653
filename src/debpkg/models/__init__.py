"""Expose package metadata models."""

from .metadata import PackageMetadata
from .vcs import Priority, VcsType
from .version import ComponentVersion, ExplicitVersion, Version

__all__ = [
    "ComponentVersion",
    "ExplicitVersion",
    "PackageMetadata",
    "Priority",
    "VcsType",
    "Version",
]
