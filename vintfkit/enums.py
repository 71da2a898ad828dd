"""Enumerations used throughout manifests and compatibility matrices."""

from __future__ import annotations

import enum

__all__ = [
    "Arch",
    "HalFormat",
    "Transport",
    "Tristate",
    "KernelConfigType",
    "SchemaType",
    "XmlSchemaFormat",
    "Level",
    "label",
    "from_label",
]


class Arch(enum.Enum):
    """Bitness of a passthrough HAL; values combine as a bit set."""

    ARCH_EMPTY = 0
    ARCH_32 = 1
    ARCH_64 = 2
    ARCH_32_64 = 3

    def __or__(self, other: Arch) -> Arch:
        if not isinstance(other, Arch):
            return NotImplemented
        return Arch(self.value | other.value)

    def has32(self) -> bool:
        """Whether 32-bit is included."""
        return self in (Arch.ARCH_32, Arch.ARCH_32_64)

    def has64(self) -> bool:
        """Whether 64-bit is included."""
        return self in (Arch.ARCH_64, Arch.ARCH_32_64)

    def contains(self, other: Arch) -> bool:
        """Whether this defines every bitness present in ``other``."""
        return (other.value & ~self.value) == 0

    def __str__(self) -> str:
        return label(self)


class HalFormat(enum.Enum):
    """Kind of HAL interface."""

    HIDL = 0
    NATIVE = 1
    AIDL = 2

    def __str__(self) -> str:
        return label(self)


class Transport(enum.Enum):
    """How a HIDL HAL is reached."""

    EMPTY = 0
    PASSTHROUGH = 1
    HWBINDER = 2

    def __str__(self) -> str:
        return label(self)


class Tristate(enum.Enum):
    """Value of a tristate kernel config option."""

    NO = 0
    YES = 1
    MODULE = 2

    def __str__(self) -> str:
        return label(self)


class KernelConfigType(enum.Enum):
    """Type of a kernel config value in a compatibility matrix."""

    STRING = 0
    INTEGER = 1
    RANGE = 2
    TRISTATE = 3

    def __str__(self) -> str:
        return label(self)


class SchemaType(enum.Enum):
    """Whether a manifest or matrix belongs to the device or the framework."""

    DEVICE = 0
    FRAMEWORK = 1

    def __str__(self) -> str:
        return label(self)


class XmlSchemaFormat(enum.Enum):
    """Schema format of an <xmlfile> entry."""

    DTD = 0
    XSD = 1

    def __str__(self) -> str:
        return label(self)


class Level(enum.IntEnum):
    """Well-known FCM versions. Any integer is a valid level; these are named ones."""

    LEGACY = 0
    O = 1  # noqa: E741
    O_MR1 = 2
    P = 3
    Q = 4
    R = 5
    UNSPECIFIED = 2**64 - 1


_LABELS: dict[type, tuple[str, ...]] = {
    Arch: ("", "32", "64", "32+64"),
    HalFormat: ("hidl", "native", "aidl"),
    Transport: ("", "passthrough", "hwbinder"),
    Tristate: ("n", "y", "m"),
    KernelConfigType: ("string", "int", "range", "tristate"),
    SchemaType: ("device", "framework"),
    XmlSchemaFormat: ("dtd", "xsd"),
}


def _table(kind: type) -> tuple[str, ...]:
    try:
        return _LABELS[kind]
    except KeyError:
        raise TypeError(f"{kind.__name__} has no string labels") from None


def label(value: enum.Enum) -> str:
    """Return the textual form of an enumeration member."""
    return _table(type(value))[value.value]


def from_label(kind: type, text: str) -> enum.Enum:
    """Parse ``text`` into a member of ``kind``; raise ValueError if unknown."""
    table = _table(kind)
    try:
        index = table.index(text)
    except ValueError:
        raise ValueError(f"{text!r} is not a valid {kind.__name__}") from None
    return kind(index)