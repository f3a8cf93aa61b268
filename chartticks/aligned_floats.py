"""Float tick generation aligned to powers of ten."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

from .base import Format, GeneratedTicks, Generator, Span


def scale10(value: float) -> int:
    """Power of ten of ``value``: 1 for the tens, -1 for the tenths, 0 for zero."""
    magnitude = abs(value)
    if magnitude == 0 or not math.isfinite(magnitude):
        return 0
    return math.floor(math.log10(magnitude))


@dataclass(frozen=True)
class FloatFormat(Format):
    """Formats floats to a power-of-ten precision."""

    scale: int

    def format(self, value: float) -> str:
        if math.isnan(value):
            return "-"
        scale = self.scale
        precision = -scale if scale < 0 else 0
        text = f"{value:.{precision}f}"
        if scale > 0:
            # Zero out digits left of the point, keeping at least the leading one
            neg_offset = 1 if text.startswith("-") else 0
            scale = min(scale, len(text) - 1 - neg_offset)
            offset = len(text) - scale
            text = text[:offset] + "0" * scale
        return text


@dataclass(frozen=True)
class AlignedFloats(Generator):
    """Generates float ticks aligned to nice values."""

    def generate(self, first: float, last: float, span: Span) -> GeneratedTicks:
        scale, count = self.find_precision(first, last, span)
        scale, ticks = self.generate_count(first, last, scale, count)
        return GeneratedTicks(FloatFormat(scale), ticks)

    @staticmethod
    def find_precision(first: float, last: float, span: Span) -> tuple[int, int]:
        """Return the scale and tick count to use for the range and span."""
        # Show one more digit than the range's own scale
        scale = scale10(last - first) - 1
        lower_count = AlignedFloats.mock_value_count(first, last, scale, span)
        # Raise precision so neighbouring ticks stay distinguishable
        scale -= scale10(lower_count - 2.0)
        upper_count = AlignedFloats.mock_value_count(first, last, scale, span)
        return scale, upper_count

    @staticmethod
    def mock_value_count(first: float, last: float, scale: int, span: Span) -> int:
        """How many of the widest possible labels fit in the span."""
        state = FloatFormat(scale)
        consumed = max(span.consumed(state, [first]), span.consumed(state, [last]))
        try:
            ratio = span.length() / consumed
        except ZeroDivisionError:
            ratio = math.inf if span.length() > 0 else math.nan
        if math.isnan(ratio) or ratio <= 0:
            return 0
        if math.isinf(ratio):
            return sys.maxsize
        return int(ratio)

    @staticmethod
    def generate_count(
        first: float, last: float, scale: int, count: int
    ) -> tuple[int, list[float]]:
        """Return ``count`` evenly spaced ticks from ``first`` to ``last`` inclusive.

        With a count of one or less, or an empty range, the midpoint alone is returned.
        """
        span = last - first
        if count <= 1 or first == last:
            return scale, [first + span / 2.0]
        step = span / (count - 1)
        return scale, [first + i * step for i in range(count)]