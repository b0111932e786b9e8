"""TMC2209 stepper motor driver in step/direction mode."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Any, Callable, Optional

from mcuframe.gpio import HardwareGPIO, PinState, Pull

MODE_INPUT = 0x0
MODE_OUTPUT_PP = 0x1

_U32 = 0xFFFFFFFF
_INT16_MIN = -0x8000
_INT16_MAX = 0x7FFF

Pin = tuple[Any, int]


class StepperDirection(IntEnum):
    """Level of the direction pin for each turning direction."""

    RIGHT = int(PinState.SET)
    LEFT = int(PinState.RESET)


class StepperHandler(IntEnum):
    """Events a handler can be registered for."""

    ON_LIMIT = 0
    STEP = 1


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000)


class TMC2209:
    """Drives a stepper through its enable, step and direction pins.

    Each pin is a ``(port, pin)`` pair. The driver counts steps between zero
    and ``limit``; reaching either end calls the limit handler and reverses.
    """

    def __init__(
        self,
        gpio: HardwareGPIO,
        enable: Pin,
        step: Pin,
        direction: Pin,
        ms1: Pin,
        ms2: Pin,
        zero: Pin,
        delay: Optional[Callable[[int], None]] = None,
    ):
        self._gpio = gpio
        self._enable_pin = enable
        self._step_pin = step
        self._direction_pin = direction
        self._ms1_pin = ms1
        self._ms2_pin = ms2
        self._zero_pin = zero
        self._delay = delay or _sleep_ms
        self._handlers: dict[StepperHandler, Callable[[], None]] = {}
        self._on_step_limit = 0
        self._limit = _U32
        self.steps = 0
        self._direction = StepperDirection.RIGHT

        gpio.setup(*enable, MODE_OUTPUT_PP, Pull.UP)
        gpio.setup(*step, MODE_OUTPUT_PP, Pull.UP)
        gpio.setup(*direction, MODE_OUTPUT_PP, Pull.UP)
        gpio.set(*direction, PinState.SET)
        gpio.setup(*ms1, MODE_OUTPUT_PP, Pull.UP)
        gpio.setup(*ms2, MODE_OUTPUT_PP, Pull.UP)
        gpio.setup(*zero, MODE_INPUT, Pull.UP)

    @property
    def limit(self):
        """Number of steps between the two ends of travel."""
        return self._limit

    @limit.setter
    def limit(self, value):
        self._limit = value & _U32

    @property
    def direction(self):
        """Current turning direction."""
        return self._direction

    @property
    def on_step_limit(self):
        """Step count given with the last :meth:`on_step`."""
        return self._on_step_limit

    def home(self):
        """Step until the zero switch changes state, then reset the count."""
        last_state = self._gpio.read_input(*self._zero_pin)
        self.set_direction(
            StepperDirection.LEFT if last_state else StepperDirection.RIGHT
        )
        while self._gpio.read_input(*self._zero_pin) == last_state:
            self.step()
            self._delay(1)
        self.set_direction(StepperDirection.RIGHT)
        self.steps = 0

    def step(self, steps=1):
        """Move ``steps`` steps, backwards if negative, then call the step handler."""
        if not _INT16_MIN <= steps <= _INT16_MAX:
            raise ValueError(f"step count out of range: {steps}")
        move = self.forward if steps > 0 else self.back
        for _ in range(abs(steps)):
            move()
        self._fire(StepperHandler.STEP)

    def forward(self):
        """One step in the current direction."""
        self.steps = (self.steps + 1) & _U32
        if self.steps >= self._limit:
            self.steps = 0
            self._fire(StepperHandler.ON_LIMIT)
            self.reverse()
        self._gpio.set(*self._direction_pin, PinState(int(self._direction)))
        self._gpio.toggle(*self._step_pin)

    def back(self):
        """One step against the current direction."""
        if self.steps == 0:
            self.steps = (self._limit + 1) & _U32
            self._fire(StepperHandler.ON_LIMIT)
            self.reverse()
        else:
            self.steps -= 1
        self._gpio.set(*self._direction_pin, PinState(not self._direction))
        self._gpio.toggle(*self._step_pin)

    def reverse(self):
        """Swap the turning direction."""
        if self._direction == StepperDirection.LEFT:
            self._direction = StepperDirection.RIGHT
        else:
            self._direction = StepperDirection.LEFT
        self._gpio.toggle(*self._direction_pin)

    def set_direction(self, direction):
        """Set the turning direction and drive the direction pin."""
        self._direction = StepperDirection(direction)
        self._gpio.set(*self._direction_pin, PinState(int(self._direction)))

    def toggle_power(self):
        """Invert the enable pin."""
        self._gpio.toggle(*self._enable_pin)

    def enable(self):
        """Drive the enable pin high."""
        self._gpio.set(*self._enable_pin, PinState.SET)

    def disable(self):
        """Drive the enable pin low."""
        self._gpio.set(*self._enable_pin, PinState.RESET)

    def set_handler(self, handler, callback):
        """Register ``callback`` for the event ``handler``."""
        self._handlers[StepperHandler(handler)] = callback

    def on_limit(self, callback):
        """Register ``callback`` for reaching an end of travel."""
        self._handlers[StepperHandler.ON_LIMIT] = callback

    def on_step(self, steps, callback):
        """Register ``callback`` to run after each call of :meth:`step`."""
        self._handlers[StepperHandler.STEP] = callback
        self._on_step_limit = steps & _U32

    def _fire(self, handler: StepperHandler) -> None:
        callback = self._handlers.get(handler)
        if callback is not None:
            callback()