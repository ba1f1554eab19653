"""Package build session holding the metadata of one .deb."""

import logging

from debpkg.control import render_control
from debpkg.models import PackageMetadata

logger = logging.getLogger(__name__)


class SessionClosedError(RuntimeError):
    """Raised when a closed DebPackage is asked to render."""


class DebPackage:
    """One package-build session.

    Owns a :class:`PackageMetadata` for the lifetime of the session. Use it as a
    context manager so the session is closed when the build is done:

        with DebPackage() as deb:
            deb.metadata.name = "foobar"
            control = deb.control(installed_size)
    """

    def __init__(self, metadata: PackageMetadata | None = None):
        self.metadata = metadata if metadata is not None else PackageMetadata()
        self._closed = False
        logger.debug(f"Opened package session for '{self.metadata.name}'")

    @property
    def closed(self) -> bool:
        return self._closed

    def control(self, installed_size_bytes: int = 0) -> str:
        """Render the control file for the current metadata."""
        if self._closed:
            raise SessionClosedError(f"Package session for '{self.metadata.name}' is closed")
        return render_control(self.metadata, installed_size_bytes)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        logger.debug(f"Closed package session for '{self.metadata.name}'")

    def __enter__(self) -> "DebPackage":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
