"""Default generators and axis positions for the supported tick types."""

from __future__ import annotations

from numbers import Real
from typing import Any

from .aligned_floats import AlignedFloats
from .base import Generator
from .timestamps import NANOS_PER_SECOND, Timestamp, Timestamps


def _check_type(tick_type: Any) -> None:
    if not isinstance(tick_type, type) or not issubclass(tick_type, (float, Timestamp)):
        raise TypeError(f"unsupported tick type: {tick_type!r}")


def tick_label_generator(tick_type: type) -> Generator:
    """Default generator for tick labels of ``tick_type``."""
    _check_type(tick_type)
    if issubclass(tick_type, Timestamp):
        return Timestamps()
    return AlignedFloats()


def tooltip_generator(tick_type: type) -> Generator:
    """Default generator for tooltips of ``tick_type``."""
    _check_type(tick_type)
    if issubclass(tick_type, Timestamp):
        return Timestamps().with_long_format()
    return tick_label_generator(tick_type)


def position(tick: Any) -> float:
    """Uniform position of a tick on its axis; NaN marks missing data."""
    if isinstance(tick, Timestamp):
        seconds, nanos = divmod(tick.unix_nanos(), NANOS_PER_SECOND)
        return float(seconds) + nanos / 1e9
    if isinstance(tick, Real) and not isinstance(tick, bool):
        return float(tick)
    raise TypeError(f"unsupported tick: {tick!r}")