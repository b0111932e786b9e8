"""Random-number and time-unit helpers."""

from __future__ import annotations

import random as _random

RAND_MAX = 0x7FFFFFFF

SECONDS = 1000
MINUTES = 60000


def _draw(rng) -> int:
    source = rng if rng is not None else _random
    return source.randint(0, RAND_MAX)


def random_float(min_value, max_value, rng=None):
    """Uniform float in the closed range ``[min_value, max_value]``."""
    r = _draw(rng) / RAND_MAX
    return min_value + r * (max_value - min_value)


def random_num(min_value, max_value, rng=None):
    """Integer from a draw scaled by integer division.

    The draw is divided by ``RAND_MAX`` as integers, so the result is
    ``min_value`` except on the single top draw, which gives ``max_value``.
    """
    r = _draw(rng) // RAND_MAX
    return min_value + r * (max_value - min_value)


def duration(amount, unit=SECONDS):
    """Length of ``amount`` units in milliseconds."""
    return amount * unit