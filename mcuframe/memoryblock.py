"""A fixed region of an external memory device."""

from __future__ import annotations

from mcuframe.interfaces import ExternalMemory


class MemoryBlock:
    """Loads and saves a block of bytes at a fixed address of a device."""

    def __init__(self, device: ExternalMemory, starting_address):
        self._device = device
        self._starting_address = starting_address

    @property
    def starting_address(self):
        return self._starting_address

    def load_block(self, size, callback=None):
        """Read ``size`` bytes from the block; ``callback`` receives them."""
        self._device.read_from_memory(self._starting_address, size, callback)

    def save_block(self, data):
        """Write ``data`` to the block."""
        self._device.write_to_memory(self._starting_address, data)