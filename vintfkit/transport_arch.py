"""Transport and bitness of a HAL entry in a manifest."""

from __future__ import annotations

import functools
from dataclasses import dataclass

from vintfkit.enums import Arch, Transport

__all__ = ["TransportArch"]


@functools.total_ordering
@dataclass(frozen=True)
class TransportArch:
    """The <transport arch="..."> element of a manifest HAL.

    Valid combinations are passthrough with any non-empty arch, hwbinder
    with no arch, or no element at all.
    """

    transport: Transport = Transport.EMPTY
    arch: Arch = Arch.ARCH_EMPTY

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TransportArch):
            return NotImplemented
        return (self.transport.value, self.arch.value) < (
            other.transport.value,
            other.arch.value,
        )

    def is_empty(self) -> bool:
        """Whether neither transport nor arch is set."""
        return self.transport is Transport.EMPTY and self.arch is Arch.ARCH_EMPTY

    def is_valid(self) -> bool:
        """Whether the transport and arch form an allowed combination."""
        if self.transport is Transport.PASSTHROUGH:
            return self.arch is not Arch.ARCH_EMPTY
        return self.arch is Arch.ARCH_EMPTY