"""PWM output on a timer channel."""

from __future__ import annotations

from typing import Protocol

_U32 = 0xFFFFFFFF


class _PWMTimer(Protocol):
    def start_pwm(self, channel) -> None: ...

    def set_compare(self, channel, value) -> None: ...


class PWM:
    """Starts PWM on a timer channel and sets its compare value."""

    def __init__(self, timer: _PWMTimer, channel):
        self._timer = timer
        self._channel = channel
        self._value = 0
        timer.start_pwm(channel)

    @property
    def channel(self):
        return self._channel

    def set(self, value):
        """Set the compare value, i.e. the pulse width in timer ticks."""
        self._value = value & _U32
        self._timer.set_compare(self._channel, self._value)

    def get(self):
        """The compare value last set."""
        return self._value