"""Render package metadata as the text of a Debian binary ``control`` file."""

import logging
import re
from collections.abc import Callable, Iterator
from typing import NamedTuple

from debpkg.constants import KIB
from debpkg.models import PackageMetadata, Priority, VcsType

logger = logging.getLogger(__name__)

# one physical line, keeping its "\n" terminator if it has one
_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


class ControlField(NamedTuple):
    """An optional control field: emitted only when ``present`` holds for the metadata."""

    label: Callable[[PackageMetadata], str]
    value: Callable[[PackageMetadata], str]
    present: Callable[[PackageMetadata], bool]


def _text(label: str, attr: str) -> ControlField:
    return ControlField(
        label=lambda m: label,
        value=lambda m: getattr(m, attr),
        present=lambda m: bool(getattr(m, attr)),
    )


def _relationship(attr: str) -> ControlField:
    label = "-".join(part.capitalize() for part in attr.split("_"))
    return ControlField(
        label=lambda m: label,
        value=lambda m: ", ".join(getattr(m, attr)),
        present=lambda m: bool(getattr(m, attr)),
    )


# Optional fields go between Installed-Size and Description, in this order.
# Homepage and the Vcs-* fields stay last, right before Description.
OPTIONAL_FIELDS: tuple[ControlField, ...] = (
    _text("Section", "section"),
    ControlField(
        lambda m: "Priority",
        lambda m: m.priority.value,
        lambda m: m.priority is not Priority.UNSET,
    ),
    ControlField(lambda m: "Essential", lambda m: "yes", lambda m: m.essential),
    _text("Source", "source"),
    _text("Built-Using", "built_using"),
    _relationship("pre_depends"),
    _relationship("depends"),
    _relationship("recommends"),
    _relationship("suggests"),
    _relationship("enhances"),
    _relationship("breaks"),
    _relationship("conflicts"),
    _relationship("provides"),
    _relationship("replaces"),
    _text("Homepage", "homepage"),
    ControlField(
        lambda m: m.vcs_type.control_label,
        lambda m: m.vcs_url,
        lambda m: m.vcs_type is not VcsType.UNSET and bool(m.vcs_url),
    ),
    _text("Vcs-Browser", "vcs_browser"),
)


def installed_size_kib(installed_size_bytes: int) -> int:
    """Round a byte count up to whole kibibytes, e.g. 1025 -> 2.

    No guard for negative input: the same floor((n + 1023) / 1024) applies.
    """
    return (installed_size_bytes + KIB - 1) // KIB


def format_long_description(description: str) -> str:
    """Indent every line of a long description by one space.

    Blank lines become a single space and are kept as-is; the result ends
    with a newline only if ``description`` does.
    """
    return "".join(f" {line}" for line in _LINE_RE.findall(description))


def control_fields(metadata: PackageMetadata, installed_size_bytes: int) -> Iterator[tuple[str, str]]:
    """Yield the ``(label, value)`` pairs of the control file in output order.

    The long description is not included; see :func:`render_control`.
    """
    yield "Package", metadata.name
    yield "Version", metadata.resolved_version()
    yield "Architecture", metadata.resolved_architecture()
    yield "Maintainer", f"{metadata.maintainer} <{metadata.maintainer_email}>"
    yield "Installed-Size", str(installed_size_kib(installed_size_bytes))

    for field in OPTIONAL_FIELDS:
        if not field.present(metadata):
            continue
        yield field.label(metadata), field.value(metadata)

    yield "Description", metadata.short_description


def render_control(metadata: PackageMetadata, installed_size_bytes: int) -> str:
    """Render the full control file text for ``metadata``.

    Args:
        metadata: The populated package metadata
        installed_size_bytes: Total size of the installed files in bytes

    Returns:
        The control file, LF line endings. The ``Description:`` line always ends
        with a newline, continuation lines follow only for a non-empty long description.
    """
    lines = [f"{label}: {value}\n" for label, value in control_fields(metadata, installed_size_bytes)]
    control = "".join(lines) + format_long_description(metadata.description)
    logger.debug(f"Rendered control for '{metadata.name}': {len(lines)} fields, {len(control)} chars")
    return control
