"""Banks of 16-bit registers, optionally backed by external memory."""

from __future__ import annotations

import struct
from typing import ClassVar, Optional

from mcuframe.memoryblock import MemoryBlock

_U16 = 0xFFFF


class RegisterBank:
    """A run of 16-bit registers starting at a full address.

    Every bank is entered in a class-wide registry that :meth:`find`
    searches. With a memory block the registers are loaded on creation
    and stored as little-endian words.
    """

    _banks: ClassVar[list["RegisterBank"]] = []

    def __init__(self, start, size, memory_block: Optional[MemoryBlock] = None):
        self._start = start & _U16
        self._size = size & _U16
        self._stop = (self._start + self._size) & _U16
        self._memory_block = memory_block
        self._registers = [0] * self._size
        type(self)._banks.append(self)
        self.load()

    @property
    def start(self):
        return self._start

    @property
    def size(self):
        return self._size

    @property
    def stop(self):
        return self._stop

    @classmethod
    def find(cls, full_address):
        """The first bank whose range, end included, holds ``full_address``."""
        for bank in cls._banks:
            if bank._start <= full_address <= bank._stop:
                return bank
        return None

    @classmethod
    def forget_all(cls):
        """Empty the registry."""
        cls._banks.clear()

    def load(self):
        """Read the registers from the memory block, if there is one."""
        if self._memory_block is not None:
            self._memory_block.load_block(self._size * 2, self._fill)

    def _fill(self, data: bytes) -> None:
        usable = len(data) - len(data) % 2
        for i, (word,) in enumerate(struct.iter_unpack("<H", bytes(data[:usable]))):
            if i >= len(self._registers):
                break
            self._registers[i] = word

    def save(self):
        """Write the registers to the memory block, if there is one."""
        if self._memory_block is not None:
            self._memory_block.save_block(
                struct.pack(f"<{len(self._registers)}H", *self._registers)
            )

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._registers):
            raise IndexError(f"register index out of range: {index}")
        return index

    def set_value(self, reg_address, value, instant_save=True):
        """Set the register at offset ``reg_address`` within the bank."""
        self._registers[self._check(reg_address)] = value & _U16
        if instant_save:
            self.save()

    def get_value(self, reg_address):
        """The register at offset ``reg_address`` within the bank."""
        return self._registers[self._check(reg_address)]

    def set_register(self, full_address, value, instant_save=True):
        """Set the register at ``full_address``."""
        self.set_value(full_address - self._start, value, instant_save)

    def get_register(self, full_address):
        """The register at ``full_address``."""
        return self.get_value(full_address - self._start)

    def read_registers(self, address, size):
        """Up to ``size`` registers from ``address`` on, stopping at the bank end."""
        offset = self._check(address - self._start) if self._registers else None
        if offset is None:
            raise IndexError(f"register address out of range: {address}")
        return self._registers[offset : offset + size]

    def release(self):
        """Drop the registers and remove the bank from the registry."""
        self._registers = []
        if self in type(self)._banks:
            type(self)._banks.remove(self)