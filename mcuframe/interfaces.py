"""Shared bus and external-memory interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Callable, Optional

DataCallback = Callable[[bytes], None]
"""Called with the bytes of a finished transfer."""

MEM_ADR_INVALID = 0


class AddressSize(IntEnum):
    """Width of a device's internal memory address, in bytes."""

    BITS_8 = 1
    BITS_16 = 2
    BITS_24 = 3
    BITS_32 = 4


class ExternalMemory(ABC):
    """A memory device that can be read from and written to at an address."""

    @abstractmethod
    def read_from_memory(self, address, size, callback: Optional[DataCallback] = None):
        """Read ``size`` bytes at ``address``; ``callback`` receives them."""

    @abstractmethod
    def write_to_memory(self, address, data):
        """Write ``data`` starting at ``address``."""