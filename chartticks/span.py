"""Spans describing the space available for tick labels along an axis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .base import Format, Span

TickFormatFn = Callable[[Any, Format], str]


@dataclass
class VerticalSpan(Span):
    """A vertical axis: each tick takes one line of text."""

    line_height: float
    avail_height: float

    def length(self) -> float:
        return self.avail_height

    def consumed(self, state: Format, ticks: Sequence[Any]) -> float:
        return self.line_height * len(ticks)


@dataclass
class HorizontalSpan(Span):
    """A horizontal axis: every tick is as wide as the widest label."""

    font_width: float
    min_chars: int
    padding_width: float
    avail_width: float
    format: TickFormatFn

    @staticmethod
    def identity_format() -> TickFormatFn:
        """A label function that defers to the generator's format."""
        return lambda tick, state: state.format(tick)

    def length(self) -> float:
        return self.avail_width

    def consumed(self, state: Format, ticks: Sequence[Any]) -> float:
        max_chars = max(
            (max(len(self.format(tick, state)), self.min_chars) for tick in ticks),
            default=0,
        )
        max_label_width = max_chars * self.font_width + self.padding_width * 2.0
        return max_label_width * len(ticks)