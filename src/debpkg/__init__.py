import logging

from rich.logging import RichHandler

from .constants import LOG_LEVEL
from .control import control_fields, format_long_description, installed_size_kib, render_control
from .models import ComponentVersion, ExplicitVersion, PackageMetadata, Priority, VcsType
from .package import DebPackage, SessionClosedError

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)],
)

__all__ = [
    "ComponentVersion",
    "DebPackage",
    "ExplicitVersion",
    "PackageMetadata",
    "Priority",
    "SessionClosedError",
    "VcsType",
    "control_fields",
    "format_long_description",
    "installed_size_kib",
    "render_control",
]
