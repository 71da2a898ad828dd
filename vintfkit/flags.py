"""Flags that select compatibility checks and serialized sections."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "CheckField",
    "CheckFlags",
    "SerializeField",
    "SerializeFlags",
    "ENABLE_ALL_CHECKS",
    "DISABLE_ALL_CHECKS",
    "DISABLE_AVB_CHECK",
    "DISABLE_RUNTIME_INFO",
    "DEFAULT_CHECKS",
    "EVERYTHING",
    "NO_HALS",
    "NO_AVB",
    "NO_SEPOLICY",
    "NO_VNDK",
    "NO_KERNEL",
    "NO_XMLFILES",
    "NO_SSDK",
    "NO_FQNAME",
    "NO_KERNEL_CONFIGS",
    "NO_KERNEL_MINOR_REVISION",
    "NO_TAGS",
    "HALS_ONLY",
    "XMLFILES_ONLY",
    "SEPOLICY_ONLY",
    "VNDK_ONLY",
    "HALS_NO_FQNAME",
    "SSDK_ONLY",
]


class CheckField(enum.IntEnum):
    """A compatibility check that can be switched on or off; value is its bit."""

    AVB = 0
    RUNTIME_INFO = 1
    KERNEL = 2


@dataclass(frozen=True)
class CheckFlags:
    """An immutable set of enabled compatibility checks."""

    value: int

    def enable(self, field: CheckField) -> CheckFlags:
        return CheckFlags(self.value | (1 << field))

    def disable(self, field: CheckField) -> CheckFlags:
        return CheckFlags(self.value & ~(1 << field))

    def is_enabled(self, field: CheckField) -> bool:
        return bool(self.value & (1 << field))


class SerializeField(enum.IntEnum):
    """A section of the XML output that can be included or left out."""

    HALS = 0
    AVB = 1
    SEPOLICY = 2
    VNDK = 3
    KERNEL = 4
    XML_FILES = 5
    SSDK = 6
    FQNAME = 7
    KERNEL_CONFIGS = 8
    KERNEL_MINOR_REVISION = 9
    META_VERSION = 10
    SCHEMA_TYPE = 11


_U32 = 0xFFFFFFFF


@dataclass(frozen=True)
class SerializeFlags:
    """An immutable 32-bit set of sections to serialize."""

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value & _U32)

    def enable(self, field: SerializeField) -> SerializeFlags:
        return SerializeFlags(self.value | (1 << field))

    def disable(self, field: SerializeField) -> SerializeFlags:
        return SerializeFlags(self.value & ~(1 << field))

    def is_enabled(self, field: SerializeField) -> bool:
        return bool(self.value & (1 << field))


ENABLE_ALL_CHECKS = CheckFlags(~0)
DISABLE_ALL_CHECKS = CheckFlags(0)
# Skip the AVB version check when checking runtime info.
DISABLE_AVB_CHECK = ENABLE_ALL_CHECKS.disable(CheckField.AVB)
# Skip the runtime info against framework matrix check; implies no AVB check.
DISABLE_RUNTIME_INFO = ENABLE_ALL_CHECKS.disable(CheckField.RUNTIME_INFO)
DEFAULT_CHECKS = DISABLE_AVB_CHECK

EVERYTHING = SerializeFlags(~0)
NO_HALS = EVERYTHING.disable(SerializeField.HALS)
NO_AVB = EVERYTHING.disable(SerializeField.AVB)
NO_SEPOLICY = EVERYTHING.disable(SerializeField.SEPOLICY)
NO_VNDK = EVERYTHING.disable(SerializeField.VNDK)
NO_KERNEL = EVERYTHING.disable(SerializeField.KERNEL)
NO_XMLFILES = EVERYTHING.disable(SerializeField.XML_FILES)
NO_SSDK = EVERYTHING.disable(SerializeField.SSDK)
NO_FQNAME = EVERYTHING.disable(SerializeField.FQNAME)
NO_KERNEL_CONFIGS = EVERYTHING.disable(SerializeField.KERNEL_CONFIGS)
NO_KERNEL_MINOR_REVISION = EVERYTHING.disable(SerializeField.KERNEL_MINOR_REVISION)

NO_TAGS = (
    SerializeFlags(0)
    .enable(SerializeField.META_VERSION)
    .enable(SerializeField.SCHEMA_TYPE)
)
HALS_ONLY = NO_TAGS.enable(SerializeField.HALS).enable(SerializeField.FQNAME)
XMLFILES_ONLY = NO_TAGS.enable(SerializeField.XML_FILES)
SEPOLICY_ONLY = NO_TAGS.enable(SerializeField.SEPOLICY)
VNDK_ONLY = NO_TAGS.enable(SerializeField.VNDK)
HALS_NO_FQNAME = NO_TAGS.enable(SerializeField.HALS)
SSDK_ONLY = NO_TAGS.enable(SerializeField.SSDK)