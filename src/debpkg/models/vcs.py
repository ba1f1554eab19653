from enum import Enum


class VcsType(str, Enum):
    """Version control systems a source package can be published from.

    The value doubles as the suffix of the ``Vcs-*`` control field, so
    ``VcsType.GIT`` renders as ``Vcs-Git``. UNSET suppresses the field.
    """

    UNSET = "unset"
    ARCH = "arch"
    BAZAAR = "bzr"
    CVS = "cvs"
    DARCS = "darcs"
    GIT = "git"
    MERCURIAL = "hg"
    MONOTONE = "mtn"
    SUBVERSION = "svn"

    @property
    def control_label(self) -> str | None:
        if self is VcsType.UNSET:
            return None
        return f"Vcs-{self.value.capitalize()}"


class Priority(str, Enum):
    """Debian archive priorities; UNSET leaves the field out of the control file."""

    UNSET = "unset"
    REQUIRED = "required"
    IMPORTANT = "important"
    STANDARD = "standard"
    OPTIONAL = "optional"
    EXTRA = "extra"
