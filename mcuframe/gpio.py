"""General-purpose I/O pins with edge-interrupt dispatch."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable


class PinState(IntEnum):
    """Logic level of a pin."""

    RESET = 0
    SET = 1


HIGH = PinState.SET
LOW = PinState.RESET


class Pull(IntEnum):
    """Internal pull resistor of a pin."""

    NONE = 0
    UP = 1
    DOWN = 2


class GPIOBackend(ABC):
    """The port hardware a :class:`HardwareGPIO` drives.

    Pins are bit masks within a 16-bit port, as in ``1 << 13``.
    """

    @abstractmethod
    def init_pin(self, port, pin, mode, pull):
        """Configure ``pin`` of ``port`` with ``mode`` and ``pull``."""

    @abstractmethod
    def write_pin(self, port, pin, state: PinState):
        """Drive ``pin`` to ``state``."""

    @abstractmethod
    def toggle_pin(self, port, pin):
        """Invert the output level of ``pin``."""

    @abstractmethod
    def read_pin(self, port, pin) -> PinState:
        """Level seen on the input of ``pin``."""

    @abstractmethod
    def output_register(self, port) -> int:
        """Current value of the port's output data register."""

    def enable_clocks(self) -> None:
        """Power up the ports; nothing to do by default."""

    def enable_interrupt(self, port, pin) -> None:
        """Unmask the external interrupt of ``pin``; nothing to do by default."""


@dataclass
class _Interrupt:
    port: Any
    pin: int
    callback: Callable[[], None]


class HardwareGPIO:
    """Configures, drives and reads pins, and dispatches pin interrupts."""

    def __init__(self, backend: GPIOBackend):
        self._backend = backend
        self._interrupts: list[_Interrupt] = []
        backend.enable_clocks()

    def setup(self, port, pin, mode, pull=Pull.UP):
        """Configure a pin; the pull-up is used unless another pull is given."""
        self._backend.init_pin(port, pin, mode, Pull(pull))

    def set(self, port, pin, state):
        """Drive a pin high or low."""
        self._backend.write_pin(port, pin, PinState(state))

    def toggle(self, port, pin):
        """Invert the output level of a pin."""
        self._backend.toggle_pin(port, pin)

    def read_input(self, port, pin):
        """Level on the input of a pin."""
        return PinState(self._backend.read_pin(port, pin))

    def read_output(self, port, pin):
        """Level the pin is being driven to, from the output register."""
        if not 0 < pin <= 0xFFFF:
            raise ValueError(f"invalid pin mask: {pin:#x}")
        if self._backend.output_register(port) & pin:
            return PinState.SET
        return PinState.RESET

    def attach_interrupt(self, port, pin, callback, mode):
        """Configure a pin as an interrupt source and register ``callback`` for it."""
        self._backend.init_pin(port, pin, mode, Pull.UP)
        self._backend.enable_interrupt(port, pin)
        self._interrupts.append(_Interrupt(port, pin, callback))

    def handle_interrupt(self, pin):
        """Run every callback registered for ``pin``."""
        for interrupt in list(self._interrupts):
            if interrupt.pin == pin:
                interrupt.callback()