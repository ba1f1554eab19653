"""Mutable metadata record for a binary Debian package."""

import logging
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from debpkg.constants import DEFAULT_ARCHITECTURE
from debpkg.models.vcs import Priority, VcsType
from debpkg.models.version import ComponentVersion, ExplicitVersion, Version

logger = logging.getLogger(__name__)

StrListField = Annotated[list[str], Field(default_factory=list)]


class PackageMetadata(BaseModel):
    """Everything that ends up in the ``control`` member of a .deb.

    Plain attribute assignment is the mutator for every field; values are
    type-checked and otherwise accepted as-is. The version is the exception,
    see :meth:`set_version` and :meth:`set_version_major`.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    version: Version = Field(default_factory=ComponentVersion)
    architecture: str = ""
    maintainer: str = ""
    maintainer_email: str = ""
    homepage: str = ""
    vcs_type: VcsType = VcsType.UNSET
    vcs_url: str = ""
    vcs_browser: str = ""
    short_description: str = ""
    description: str = ""

    section: str = ""
    priority: Priority = Priority.UNSET
    essential: bool = False
    source: str = ""
    built_using: str = ""

    pre_depends: StrListField
    depends: StrListField
    recommends: StrListField
    suggests: StrListField
    enhances: StrListField
    breaks: StrListField
    conflicts: StrListField
    provides: StrListField
    replaces: StrListField

    def set_version(self, full: str) -> None:
        """Set the full version string; it wins over any major/minor/patch set before or after."""
        self.version = ExplicitVersion(full=full)

    def _set_component(self, component: str, value: int) -> None:
        if isinstance(self.version, ExplicitVersion):
            logger.debug(f"Ignoring version {component}={value}, explicit version {self.version.full!r} is set")
            return
        self.version = ComponentVersion.model_validate({**self.version.model_dump(), component: value})

    def set_version_major(self, major: int) -> None:
        self._set_component("major", major)

    def set_version_minor(self, minor: int) -> None:
        self._set_component("minor", minor)

    def set_version_patch(self, patch: int) -> None:
        self._set_component("patch", patch)

    def resolved_version(self) -> str:
        return self.version.resolve()

    def resolved_architecture(self) -> str:
        return self.architecture or DEFAULT_ARCHITECTURE
