"""Analog inputs read from a DMA-filled conversion buffer."""

from __future__ import annotations

from typing import Optional

CHANNELS = 8
_U16 = 0xFFFF
_SCALE_SHIFT = 14


class Analog:
    """One channel of the shared ADC conversion buffer.

    :meth:`init` hands the buffer to a backend whose ``start(buffer)``
    method keeps it filled with raw conversions.
    """

    _raw: list[int] = [0] * CHANNELS

    @classmethod
    def init(cls, backend):
        """Start conversions into the shared buffer."""
        backend.start(cls._raw)

    def __init__(self, channel):
        if not 0 <= channel < CHANNELS:
            raise ValueError(f"no such ADC channel: {channel}")
        self._channel = channel
        self.offset: Optional[int] = None
        self.divider: Optional[int] = None

    @property
    def channel(self):
        return self._channel

    def configure_channel(self, offset, divider):
        """Set the offset and scale used by :meth:`value`."""
        self.offset = offset
        self.divider = divider

    def raw(self):
        """Latest raw conversion of this channel."""
        return self._raw[self._channel] & _U16

    def value(self):
        """Raw value scaled by ``divider / 2**14`` minus ``offset``, as 16 bits."""
        if self.offset is None or self.divider is None:
            raise RuntimeError("channel not configured")
        scaled = (self.raw() * self.divider) >> _SCALE_SHIFT
        return (scaled - self.offset) & _U16