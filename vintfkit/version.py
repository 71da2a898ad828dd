"""HAL versions, kernel versions and version ranges."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Version", "KernelVersion", "VersionRange", "META_VERSION"]


@dataclass(frozen=True, order=True)
class Version:
    """A ``major.minor`` version."""

    major: int = 0
    minor: int = 0

    def minor_at_least(self, other: Version) -> bool:
        """Same major version and a minor version no lower than ``other``'s."""
        return self.major == other.major and self.minor >= other.minor


@dataclass(frozen=True, order=True)
class KernelVersion:
    """A kernel ``version.major_rev.minor_rev`` triple."""

    version: int = 0
    major_rev: int = 0
    minor_rev: int = 0

    def drop_minor(self) -> Version:
        """The ``version.major_rev`` part as a Version."""
        return Version(self.version, self.major_rev)


@dataclass(frozen=True)
class VersionRange:
    """A range of minor versions sharing one major version, e.g. 2.3-7."""

    major: int = 0
    min_minor: int = 0
    max_minor: int | None = field(default=None)

    def __post_init__(self) -> None:
        if self.max_minor is None:
            object.__setattr__(self, "max_minor", self.min_minor)

    def min_ver(self) -> Version:
        return Version(self.major, self.min_minor)

    def max_ver(self) -> Version:
        return Version(self.major, self.max_minor)

    def is_single_version(self) -> bool:
        return self.min_minor == self.max_minor

    def contains(self, version: Version) -> bool:
        """Whether ``version`` lies within the range, bounds included."""
        return self.min_ver() <= version <= self.max_ver()

    def supported_by(self, version: Version) -> bool:
        """Whether a HAL at ``version`` satisfies this range."""
        return self.major == version.major and self.min_minor <= version.minor

    def overlaps(self, other: VersionRange) -> bool:
        """Whether the two ranges share at least one version."""
        return (
            self.major == other.major
            and self.min_minor <= other.max_minor
            and other.min_minor <= self.max_minor
        )


META_VERSION = Version(2, 0)