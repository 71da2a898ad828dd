"""SELinux policy, SDK and NDK sections of manifests and matrices."""

from __future__ import annotations

from dataclasses import dataclass, field

from vintfkit.version import VersionRange

__all__ = ["Sepolicy", "SystemSdk", "VendorNdk", "VndkVersionRange", "Vndk"]


@dataclass(frozen=True)
class Sepolicy:
    """The <sepolicy> section of a compatibility matrix."""

    kernel_sepolicy_version: int = 0
    sepolicy_versions: tuple[VersionRange, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sepolicy_versions", tuple(self.sepolicy_versions))


@dataclass
class SystemSdk:
    """System SDK versions provided for vendor apps."""

    versions: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.versions = set(self.versions)

    def is_empty(self) -> bool:
        return not self.versions

    def remove_versions(self, other: SystemSdk) -> SystemSdk:
        """Return the versions in this one that are not in ``other``."""
        return SystemSdk(self.versions - other.versions)

    def add_all(self, other: SystemSdk) -> None:
        """Move every version from ``other`` into this one."""
        self.versions |= other.versions
        other.versions.clear()


@dataclass(frozen=True)
class VendorNdk:
    """A vendor NDK version with its libraries; compared by version only."""

    version: str = ""
    libraries: frozenset[str] = field(default=frozenset(), compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "libraries", frozenset(self.libraries))


@dataclass(frozen=True)
class VndkVersionRange:
    """Deprecated VNDK version range, kept for older files."""

    sdk: int = 0
    vndk: int = 0
    patch_min: int = 0
    patch_max: int | None = None

    def __post_init__(self) -> None:
        if self.patch_max is None:
            object.__setattr__(self, "patch_max", self.patch_min)

    def is_single_version(self) -> bool:
        return self.patch_min == self.patch_max


@dataclass(frozen=True)
class Vndk:
    """Deprecated <vndk> entry, kept for older files."""

    version_range: VndkVersionRange = field(default_factory=VndkVersionRange)
    libraries: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "libraries", frozenset(self.libraries))