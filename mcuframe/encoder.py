"""Quadrature encoder on a timer in encoder mode."""

from __future__ import annotations

import weakref
from enum import IntEnum
from typing import Callable, Optional

TIM_CHANNEL_ALL = 0x3C

_U32 = 0xFFFFFFFF


class StartType(IntEnum):
    """How the timer is started."""

    POLL = 0
    IT = 1
    DMA = 2


class TimerCounter:
    """The timer an :class:`Encoder` reads.

    Holds the counter register and the counting direction; a hardware
    adapter overrides the start and interrupt methods.
    """

    def __init__(self):
        self._counter = 0
        self.counting_down = False
        self.start_type: Optional[StartType] = None
        self.channel: Optional[int] = None
        self.update_interrupt_enabled = False

    @property
    def counter(self):
        """The 32-bit counter register."""
        return self._counter

    @counter.setter
    def counter(self, value):
        self._counter = value & _U32

    def start_encoder(self, start_type, channel):
        """Start counting in encoder mode."""
        self.start_type = StartType(start_type)
        self.channel = channel

    def enable_update_interrupt(self):
        """Clear the update flag and unmask the update interrupt."""
        self.update_interrupt_enabled = True


def _int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


class Encoder:
    """Position of an encoder, read from the timer or counted by interrupts.

    Without a callback the position is the timer counter, clamped to the
    limits. With a callback every timer interrupt moves it by one.
    """

    _instances: "weakref.WeakValueDictionary[int, Encoder]" = (
        weakref.WeakValueDictionary()
    )

    def __init__(self, timer: TimerCounter, start_type=StartType.IT, channel=TIM_CHANNEL_ALL):
        self._timer = timer
        self._value = 0
        self._min = 0
        self._max = -1
        self._callback: Optional[Callable[[], None]] = None
        type(self)._instances.setdefault(id(timer), self)
        start_type = StartType(start_type)
        if start_type in (StartType.POLL, StartType.IT):
            timer.start_encoder(start_type, channel)

    @classmethod
    def get_instance(cls, timer):
        """The encoder reading ``timer``, or ``None``."""
        return cls._instances.get(id(timer))

    def direction(self):
        """True while the timer counts up."""
        return not self._timer.counting_down

    def get_value(self):
        """Current position."""
        if self._callback is not None:
            return self._value
        self._value = _int16(self._timer.counter)
        if self._value < self._min:
            self._value = self._min
            self._timer.counter = self._value
        elif self._value > self._max:
            self._value = self._max
            self._timer.counter = self._value
        return self._value

    def set_value(self, value):
        """Set the position."""
        if self._callback is None:
            self._timer.counter = value
        else:
            self._value = value

    def set_limits(self, minimum, maximum):
        """Bounds the polled position is clamped to."""
        self._min = minimum
        self._max = maximum

    def attach_interrupt(self, callback):
        """Count by interrupts from now on and call ``callback`` on each."""
        had_callback = self._callback is not None
        self._callback = callback
        if not had_callback and callback is not None:
            self._timer.enable_update_interrupt()

    def tim_interrupt(self):
        """The timer counted one step."""
        self._value += 1 if self.direction() else -1
        if self._callback is not None:
            self._callback()