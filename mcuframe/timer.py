"""Base timer configuration."""

from __future__ import annotations

from dataclasses import dataclass

_U32 = 0xFFFFFFFF
_PRESCALER = 10000


@dataclass
class TimerConfig:
    """Initialisation values of a timer."""

    prescaler: int = 0
    period: int = 0


class Timer:
    """Sets up a timer to count ``period`` ticks of its clock / 10000."""

    def __init__(self, config: TimerConfig):
        self._config = config

    @property
    def config(self):
        return self._config

    def setup(self, period):
        """Divide the clock by 10000 and overflow every ``period`` ticks."""
        self._config.prescaler = _PRESCALER - 1
        self._config.period = (period - 1) & _U32