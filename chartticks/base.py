"""Core abstractions shared by tick generators: formats, spans and results."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, Sequence, TypeVar

T = TypeVar("T")


class Format(ABC, Generic[T]):
    """Turns a tick value into a label, as chosen by the generator that produced it."""

    @abstractmethod
    def format(self, value: T) -> str:
        """Return the label for ``value``."""


class Span(ABC, Generic[T]):
    """Space available along an axis and how much of it a set of ticks uses."""

    @abstractmethod
    def length(self) -> float:
        """Total space available."""

    @abstractmethod
    def consumed(self, state: Format[T], ticks: Sequence[T]) -> float:
        """Space used by ``ticks`` when labelled with ``state``."""


class Generator(ABC, Generic[T]):
    """Produces ticks between two values that fit within a span."""

    @abstractmethod
    def generate(self, first: T, last: T, span: Span[T]) -> "GeneratedTicks[T]":
        """Generate ticks from ``first`` to ``last`` that fit in ``span``."""


class NilFormat(Format[Any]):
    """Placeholder format used when there are no ticks."""

    def format(self, value: Any) -> str:
        return "-"


@dataclass(eq=False)
class GeneratedTicks(Generic[T]):
    """Ticks together with the format that labels them.

    Equality compares the ticks only: a generator must yield the same format
    whenever it yields the same ticks.
    """

    state: Format[T]
    ticks: list[T] = field(default_factory=list)

    @classmethod
    def none(cls) -> "GeneratedTicks[T]":
        """An empty result."""
        return cls(NilFormat(), [])

    def labels(self) -> list[str]:
        """Labels for every tick, in order."""
        return [self.state.format(tick) for tick in self.ticks]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeneratedTicks):
            return NotImplemented
        return self.ticks == other.ticks