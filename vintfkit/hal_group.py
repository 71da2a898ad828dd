"""A named collection of HAL entries, with instance queries."""

from __future__ import annotations

import abc
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from vintfkit.enums import HalFormat
from vintfkit.version import Version

__all__ = ["Named", "HalConflictError", "HalGroup"]

O = TypeVar("O")


@dataclass
class Named(Generic[O]):
    """An object paired with a name, such as the file it came from."""

    name: str
    object: O


class HalConflictError(ValueError):
    """Raised when a HAL cannot be merged into a group."""


class _Hal(Protocol):
    name: str
    format: HalFormat

    def instances(self) -> Iterable[Any]: ...


H = TypeVar("H", bound=_Hal)


class HalGroup(abc.ABC, Generic[H]):
    """A multimap from HAL name to HAL entries.

    A HAL has ``name``, ``format`` and ``instances()``; an instance has
    ``format`` and ``interface``. Entries are kept sorted by name; entries
    sharing a name keep the order in which they were added.
    """

    def __init__(self) -> None:
        self._hals: dict[str, list[H]] = {}

    def add_all_hals(self, other: HalGroup[H]) -> None:
        """Move all HALs of ``other`` into this group.

        Raises HalConflictError on the first HAL that is rejected; ``other``
        is emptied only when all HALs were moved.
        """
        for hal in list(other.hals()):
            if not self.add(hal):
                raise HalConflictError(f'HAL "{hal.name}" has a conflict.')
        other._hals.clear()

    def add(self, hal: H) -> bool:
        """Add a HAL; return False if ``should_add`` rejects it."""
        return self._add_internal(hal) is not None

    def should_add(self, hal: H) -> bool:
        """Filter applied before adding; accepts everything by default."""
        return True

    def _add_internal(self, hal: H) -> H | None:
        if not self.should_add(hal):
            return None
        self._hals.setdefault(hal.name, []).append(hal)
        return hal

    def get_hals(self, name: str) -> list[H]:
        """All HALs with the given name."""
        return list(self._hals.get(name, ()))

    def hals(self) -> Iterator[H]:
        """Iterate over all HALs, ordered by name."""
        for name in sorted(self._hals):
            yield from self._hals[name]

    def get_any_hal(self, name: str) -> H | None:
        """The first HAL with the given name, or None."""
        hals = self._hals.get(name)
        return hals[0] if hals else None

    def instances(self) -> Iterator[Any]:
        """All instances of all HALs."""
        for hal in self.hals():
            yield from hal.instances()

    def hidl_instances(self) -> Iterator[Any]:
        """All HIDL instances."""
        return self._instances_of_format(HalFormat.HIDL)

    def _instances_of_format(self, format: HalFormat) -> Iterator[Any]:
        return (e for e in self.instances() if e.format == format)

    def instances_of_package(self, format: HalFormat, package: str) -> Iterator[Any]:
        """Instances of the HALs named ``package`` that have the given format."""
        for hal in self.get_hals(package):
            if hal.format != format:
                continue
            yield from hal.instances()

    @abc.abstractmethod
    def instances_of_version(
        self, format: HalFormat, package: str, version: Version
    ) -> Iterator[Any]:
        """Instances of ``package@version::*/*`` in the given format."""

    def instances_of_interface(
        self, format: HalFormat, package: str, version: Version, interface: str
    ) -> Iterator[Any]:
        """Instances of ``package@version::interface/*`` in the given format."""
        return (
            e
            for e in self.instances_of_version(format, package, version)
            if e.interface == interface
        )

    def hidl_instances_of_version(self, package: str, version: Version) -> Iterator[Any]:
        return self.instances_of_version(HalFormat.HIDL, package, version)

    def hidl_instances_of_interface(
        self, package: str, version: Version, interface: str
    ) -> Iterator[Any]:
        return self.instances_of_interface(HalFormat.HIDL, package, version, interface)

    def hidl_fq_instances(
        self, package: str, version: Version, interface: str = ""
    ) -> list[Any]:
        """HIDL instances of ``package@version``, narrowed to ``interface`` if given."""
        if not interface:
            return list(self.hidl_instances_of_version(package, version))
        return list(self.hidl_instances_of_interface(package, version, interface))