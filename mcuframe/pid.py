"""PID controller with proportional-on-error or on-measurement."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Callable, Optional

_U32 = 0xFFFFFFFF


class Mode(IntEnum):
    MANUAL = 0
    AUTOMATIC = 1


class Direction(IntEnum):
    DIRECT = 0
    REVERSE = 1


class ProportionalOn(IntEnum):
    MEASUREMENT = 0
    ERROR = 1


def _default_clock() -> int:
    return int(time.monotonic() * 1000) & _U32


def _clamp(value: float, low: float, high: float) -> float:
    if value > high:
        return high
    if value < low:
        return low
    return value


class PID:
    """PID controller working on its ``input``, ``output`` and ``setpoint``.

    ``clock`` returns the current time in milliseconds.
    """

    def __init__(
        self,
        kp,
        ki,
        kd,
        p_on=ProportionalOn.ERROR,
        direction=Direction.DIRECT,
        clock: Optional[Callable[[], int]] = None,
    ):
        self.input = 0.0
        self.output = 0.0
        self.setpoint = 0.0
        self._clock = clock or _default_clock
        self._in_auto = False
        self._output_sum = 0.0
        self._last_input = 0.0
        self._out_min = 0.0
        self._out_max = 255.0
        self._sample_time = 100
        self._controller_direction = Direction.DIRECT
        self._p_on = ProportionalOn.ERROR
        self._p_on_e = True
        self._kp = self._ki = self._kd = 0.0
        self._disp_kp = self._disp_ki = self._disp_kd = 0.0

        self.set_output_limits(0, 255)
        self.set_controller_direction(direction)
        self.set_tunings(kp, ki, kd, p_on)
        self._last_time = (self._clock() - self._sample_time) & _U32

    def compute(self):
        """Recompute ``output`` if in automatic mode and a sample time has passed."""
        if not self._in_auto:
            return False
        now = self._clock()
        if ((now - self._last_time) & _U32) < self._sample_time:
            return False

        value = self.input
        error = self.setpoint - value
        d_input = value - self._last_input
        self._output_sum += self._ki * error
        if not self._p_on_e:
            self._output_sum -= self._kp * d_input
        self._output_sum = _clamp(self._output_sum, self._out_min, self._out_max)

        output = self._kp * error if self._p_on_e else 0.0
        output += self._output_sum - self._kd * d_input
        self.output = _clamp(output, self._out_min, self._out_max)

        self._last_input = value
        self._last_time = now
        return True

    def set_mode(self, mode):
        """Switch between manual and automatic; entering automatic is bumpless."""
        new_auto = mode == Mode.AUTOMATIC
        if new_auto and not self._in_auto:
            self._initialize()
        self._in_auto = new_auto

    def _initialize(self) -> None:
        self._output_sum = _clamp(self.output, self._out_min, self._out_max)
        self._last_input = self.input

    def set_output_limits(self, minimum, maximum):
        """Clamp the output to ``[minimum, maximum]``; ignored if the range is empty."""
        if minimum >= maximum:
            return
        self._out_min = minimum
        self._out_max = maximum
        if self._in_auto:
            self.output = _clamp(self.output, minimum, maximum)
            self._output_sum = _clamp(self._output_sum, minimum, maximum)

    def set_tunings(self, kp, ki, kd, p_on=None):
        """Set gains; negative gains are ignored. ``p_on`` defaults to the current one."""
        if kp < 0 or ki < 0 or kd < 0:
            return
        if p_on is None:
            p_on = self._p_on
        self._p_on = ProportionalOn(p_on)
        self._p_on_e = self._p_on == ProportionalOn.ERROR

        self._disp_kp, self._disp_ki, self._disp_kd = kp, ki, kd

        seconds = self._sample_time / 1000
        self._kp = kp
        self._ki = ki * seconds
        self._kd = kd / seconds
        if self._controller_direction == Direction.REVERSE:
            self._kp, self._ki, self._kd = -self._kp, -self._ki, -self._kd

    def set_controller_direction(self, direction):
        """Choose whether a larger output drives the input up or down."""
        direction = Direction(direction)
        if self._in_auto and direction != self._controller_direction:
            self._kp, self._ki, self._kd = -self._kp, -self._ki, -self._kd
        self._controller_direction = direction

    def set_sample_time(self, sample_time):
        """Set the calculation period in milliseconds; non-positive values are ignored."""
        if sample_time > 0:
            ratio = sample_time / self._sample_time
            self._ki *= ratio
            self._kd /= ratio
            self._sample_time = int(sample_time)

    @property
    def kp(self):
        return self._disp_kp

    @property
    def ki(self):
        return self._disp_ki

    @property
    def kd(self):
        return self._disp_kd

    @property
    def mode(self):
        return Mode.AUTOMATIC if self._in_auto else Mode.MANUAL

    @property
    def direction(self):
        return self._controller_direction