"""<xmlfile> entries of manifests and matrices, and groups of them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from vintfkit.enums import XmlSchemaFormat
from vintfkit.version import Version, VersionRange

__all__ = [
    "XmlFileConflictError",
    "XmlFile",
    "MatrixXmlFile",
    "ManifestXmlFile",
    "XmlFileGroup",
]


class XmlFileConflictError(ValueError):
    """Raised when an <xmlfile> entry cannot be merged into a group."""


@dataclass(frozen=True)
class XmlFile:
    """Common part of every <xmlfile> entry."""

    name: str = ""
    overridden_path: str = ""


@dataclass(frozen=True)
class MatrixXmlFile(XmlFile):
    """An <xmlfile> entry in a compatibility matrix."""

    optional: bool = False
    format: XmlSchemaFormat = XmlSchemaFormat.DTD
    version_range: VersionRange = field(default_factory=VersionRange)


@dataclass(frozen=True)
class ManifestXmlFile(XmlFile):
    """An <xmlfile> entry in a manifest."""

    version: Version = field(default_factory=Version)


T = TypeVar("T", bound=XmlFile)


class XmlFileGroup(Generic[T]):
    """A multimap from file name to <xmlfile> entries.

    Entries are kept sorted by name; entries sharing a name keep the order
    in which they were added.
    """

    def __init__(self) -> None:
        self._xml_files: dict[str, list[T]] = {}

    def add_xml_file(self, xml_file: T) -> bool:
        """Add an entry; return False if ``should_add_xml_file`` rejects it."""
        if not self.should_add_xml_file(xml_file):
            return False
        self._xml_files.setdefault(xml_file.name, []).append(xml_file)
        return True

    def should_add_xml_file(self, xml_file: T) -> bool:
        """Filter applied before adding; accepts everything by default."""
        return True

    def get_xml_files(self, name: str) -> list[T]:
        """All entries with the given name."""
        return list(self._xml_files.get(name, ()))

    def xml_files(self) -> Iterator[T]:
        """Iterate over all entries, ordered by name."""
        for name in sorted(self._xml_files):
            yield from self._xml_files[name]

    def add_all_xml_files(self, other: XmlFileGroup[T]) -> None:
        """Move every entry of ``other`` into this group.

        Raises XmlFileConflictError on the first entry that is rejected;
        ``other`` is emptied only when all entries were moved.
        """
        for xml_file in list(other.xml_files()):
            if not self.add_xml_file(xml_file):
                raise XmlFileConflictError(
                    f'XML File "{xml_file.name}" has a conflict.'
                )
        other._xml_files.clear()