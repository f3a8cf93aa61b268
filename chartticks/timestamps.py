"""Timestamp ticks aligned to calendar periods."""

from __future__ import annotations

import calendar
import re
from bisect import bisect_left
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone, tzinfo
from enum import IntEnum
from itertools import groupby
from typing import Callable, Iterable, Iterator, Optional, Sequence, TypeVar

from .base import Format, GeneratedTicks, Generator, Span

NANOS_PER_SECOND = 1_000_000_000

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NAIVE_EPOCH = datetime(1970, 1, 1)
_SECOND = timedelta(seconds=1)
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_DIRECTIVE = re.compile(r"%([369]?f|.)", re.DOTALL)

T = TypeVar("T")


def _check_nanosecond(nanosecond: int) -> None:
    if not 0 <= nanosecond < NANOS_PER_SECOND:
        raise ValueError(f"nanosecond out of range: {nanosecond}")


def _local_candidates(tz: tzinfo, naive: datetime) -> list[int]:
    """Epoch seconds at which the wall time ``naive`` occurs in ``tz``, sorted."""
    naive = naive.replace(microsecond=0, fold=0)
    instants = set()
    for fold in (0, 1):
        aware = naive.replace(tzinfo=tz, fold=fold)
        back = aware.astimezone(timezone.utc).astimezone(tz).replace(tzinfo=None, fold=0)
        if back == naive:
            instants.add((aware - _EPOCH) // _SECOND)
    return sorted(instants)


def _add_months(naive: datetime, months: int) -> datetime:
    year, month0 = divmod(naive.year * 12 + naive.month - 1 + months, 12)
    day = min(naive.day, calendar.monthrange(year, month0 + 1)[1])
    return naive.replace(year=year, month=month0 + 1, day=day)


@dataclass(frozen=True, order=True)
class Timestamp:
    """An instant with nanosecond precision, shown in a time zone.

    Equality, ordering and hashing consider the instant only.
    """

    epoch_nanos: int
    tz: tzinfo = field(default=timezone.utc, compare=False)

    @classmethod
    def from_datetime(cls, dt: datetime, nanosecond: Optional[int] = None) -> "Timestamp":
        """Build from a datetime; naive datetimes are taken as UTC."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        if nanosecond is None:
            nanosecond = dt.microsecond * 1000
        _check_nanosecond(nanosecond)
        seconds = (dt.replace(microsecond=0) - _EPOCH) // _SECOND
        return cls(seconds * NANOS_PER_SECOND + nanosecond, dt.tzinfo)

    @classmethod
    def from_unix(
        cls, seconds: int, nanos: int = 0, tz: tzinfo = timezone.utc
    ) -> "Timestamp":
        """Build from seconds and nanoseconds since the Unix epoch."""
        _check_nanosecond(nanos)
        return cls(seconds * NANOS_PER_SECOND + nanos, tz)

    def with_nanosecond(self, nanosecond: int) -> "Timestamp":
        """The same second with its sub-second part replaced."""
        _check_nanosecond(nanosecond)
        return Timestamp(self.epoch_nanos - self.nanosecond + nanosecond, self.tz)

    def unix_nanos(self) -> int:
        """Nanoseconds since the Unix epoch."""
        return self.epoch_nanos

    @property
    def nanosecond(self) -> int:
        return self.epoch_nanos % NANOS_PER_SECOND

    @property
    def local(self) -> datetime:
        """Aware datetime in the timestamp's zone, truncated to microseconds."""
        whole = _EPOCH + timedelta(seconds=self.epoch_nanos // NANOS_PER_SECOND)
        return whole.astimezone(self.tz).replace(microsecond=self.nanosecond // 1000)

    @property
    def year(self) -> int:
        return self.local.year

    @property
    def month(self) -> int:
        return self.local.month

    @property
    def day(self) -> int:
        return self.local.day

    @property
    def hour(self) -> int:
        return self.local.hour

    @property
    def minute(self) -> int:
        return self.local.minute

    @property
    def second(self) -> int:
        return self.local.second

    def _local_nanos(self) -> int:
        naive = self.local.replace(tzinfo=None, microsecond=0)
        return ((naive - _NAIVE_EPOCH) // _SECOND) * NANOS_PER_SECOND + self.nanosecond

    def _zone_name(self, local: datetime) -> str:
        name = local.tzname() or ""
        if isinstance(self.tz, timezone) and name.startswith("UTC") and len(name) > 3:
            return name[3:]
        return name

    def strftime(self, fmt: str) -> str:
        """Format with strftime directives; ``%f`` gives nanoseconds, ``%3f``/``%6f``/``%9f`` fixed digits."""
        local = self.local
        nanos = f"{self.nanosecond:09d}"

        def expand(match: re.Match) -> str:
            spec = match.group(1)
            if spec == "f":
                return nanos
            if spec.endswith("f"):
                return nanos[: int(spec[0])]
            if spec == "Z":
                return self._zone_name(local)
            return match.group(0)

        return local.strftime(_DIRECTIVE.sub(expand, fmt))


class Period(IntEnum):
    """Periods that timestamp ticks can be aligned to, smallest first."""

    NANOSECOND = 0
    MICROSECOND = 1
    MILLISECOND = 2
    SECOND = 3
    MINUTE = 4
    HOUR = 5
    DAY = 6
    MONTH = 7
    YEAR = 8

    @staticmethod
    def all() -> list["Period"]:
        """Every period, largest first."""
        return [
            Period.YEAR,
            Period.MONTH,
            Period.DAY,
            Period.HOUR,
            Period.MINUTE,
            Period.SECOND,
            Period.MILLISECOND,
            Period.MICROSECOND,
            Period.NANOSECOND,
        ]

    def short_format(self) -> str:
        """Compact strftime format for tick labels."""
        return _SHORT_FORMATS[self]

    def long_format(self) -> str:
        """Full strftime format with date and zone."""
        return _LONG_FORMATS[self]

    def truncate_at(self, at: Timestamp) -> Optional[Timestamp]:
        """Round ``at`` down to this period in its local time, or None if that fails."""
        if self in (Period.MONTH, Period.YEAR):
            local = at.local.replace(tzinfo=None)
            month = local.month if self is Period.MONTH else 1
            start = datetime(local.year, month, 1)
            candidates = _local_candidates(at.tz, start)
            if not candidates:
                return None
            return Timestamp(candidates[-1] * NANOS_PER_SECOND, at.tz)

        if at.epoch_nanos == 0:
            return at
        span = _FIXED_NANOS[self]
        stamp = at._local_nanos()
        if not _I64_MIN <= stamp <= _I64_MAX or span > abs(stamp):
            return None
        return Timestamp(at.epoch_nanos - stamp % span, at.tz)

    def advance(self, at: Timestamp) -> Timestamp:
        """Move ``at`` forward by one period."""
        if self in (Period.MONTH, Period.YEAR):
            months = 1 if self is Period.MONTH else 12
            naive = _add_months(at.local.replace(tzinfo=None, microsecond=0), months)
            candidates = _local_candidates(at.tz, naive)
            if len(candidates) != 1:
                raise ValueError(f"{naive} is not a unique local time in {at.tz}")
            return Timestamp(candidates[0] * NANOS_PER_SECOND + at.nanosecond, at.tz)
        return Timestamp(at.epoch_nanos + _FIXED_NANOS[self], at.tz)

    def iter_aligned_range(self, start: Timestamp, stop: Timestamp) -> Iterator[Timestamp]:
        """Aligned timestamps from ``start`` (inclusive) to ``stop`` (exclusive)."""
        aligned = self.truncate_at(start)
        if aligned is None:
            aligned = stop
        while aligned < start:
            aligned = self.advance(aligned)
        while aligned < stop:
            yield aligned
            aligned = self.advance(aligned)


_SHORT_FORMATS = {
    Period.NANOSECOND: "%H:%M:%S.%f",
    Period.MICROSECOND: "%H:%M:%S.%6f",
    Period.MILLISECOND: "%H:%M:%S.%3f",
    Period.SECOND: "%H:%M:%S",
    Period.MINUTE: "%H:%M",
    Period.HOUR: "%H:%M",
    Period.DAY: "%a",
    Period.MONTH: "%b",
    Period.YEAR: "%Y",
}

_LONG_FORMATS = {
    Period.NANOSECOND: "%Y-%m-%d %H:%M:%S.%9f %Z",
    Period.MICROSECOND: "%Y-%m-%d %H:%M:%S.%6f %Z",
    Period.MILLISECOND: "%Y-%m-%d %H:%M:%S.%3f %Z",
    Period.SECOND: "%Y-%m-%d %H:%M:%S %Z",
    Period.MINUTE: "%Y-%m-%d %H:%M %Z",
    Period.HOUR: "%Y-%m-%d %H:%M %Z",
    Period.DAY: "%Y-%m-%d %H:%M %Z",
    Period.MONTH: "%B %Y %Z",
    Period.YEAR: "%Y %Z",
}

_FIXED_NANOS = {
    Period.NANOSECOND: 1,
    Period.MICROSECOND: 1_000,
    Period.MILLISECOND: 1_000_000,
    Period.SECOND: NANOS_PER_SECOND,
    Period.MINUTE: 60 * NANOS_PER_SECOND,
    Period.HOUR: 3_600 * NANOS_PER_SECOND,
    Period.DAY: 86_400 * NANOS_PER_SECOND,
}

PeriodFormatter = Callable[[Period, Timestamp], str]


def _short_format(period: Period, at: Timestamp) -> str:
    return at.strftime(period.short_format())


def _long_format(period: Period, at: Timestamp) -> str:
    return at.strftime(period.long_format())


@dataclass(frozen=True)
class _Strftime:
    fmt: str

    def __call__(self, period: Period, at: Timestamp) -> str:
        return at.strftime(self.fmt)


@dataclass(frozen=True)
class TimestampFormat(Format):
    """Labels timestamps for the period a generator settled on."""

    formatter: PeriodFormatter
    all_periods: tuple[Period, ...]
    period: Period

    def format(self, at: Timestamp) -> str:
        period = self.period
        # A tick lying exactly on a larger period is shown as that period
        for earlier in self.all_periods:
            if earlier.truncate_at(at) == at:
                period = earlier
                break
        return self.formatter(period, at)


@dataclass(frozen=True)
class Timestamps(Generator):
    """Generates timestamp ticks from a set of periods, aligned to the larger ones first."""

    periods: tuple[Period, ...] = field(default_factory=lambda: tuple(Period.all()))
    formatter: PeriodFormatter = _short_format

    def __post_init__(self) -> None:
        object.__setattr__(self, "periods", tuple(sorted(set(self.periods), reverse=True)))

    @classmethod
    def from_periods(cls, periods: Iterable[Period]) -> "Timestamps":
        """A generator over the given periods, sorted and deduplicated."""
        return cls(tuple(periods))

    @classmethod
    def from_period(cls, period: Period) -> "Timestamps":
        """A generator over a single period."""
        return cls((period,))

    def with_short_format(self) -> "Timestamps":
        """Use compact labels such as ``HH:MM:SS`` or ``YYYY`` (the default)."""
        return replace(self, formatter=_short_format)

    def with_long_format(self) -> "Timestamps":
        """Use full labels with date and time zone."""
        return replace(self, formatter=_long_format)

    def with_strftime(self, fmt: str) -> "Timestamps":
        """Use one fixed strftime format for every label."""
        return replace(self, formatter=_Strftime(fmt))

    def with_format(self, func: PeriodFormatter) -> "Timestamps":
        """Use ``func(period, timestamp)`` to produce labels."""
        return replace(self, formatter=func)

    def _state(self, period: Period) -> TimestampFormat:
        return TimestampFormat(self.formatter, self.periods, period)

    def generate(self, first: Timestamp, last: Timestamp, span: Span) -> GeneratedTicks:
        if not self.periods:
            return GeneratedTicks.none()
        ticks: list[Timestamp] = []
        state = self._state(self.periods[0])
        for period in self.periods:
            candidate = list(period.iter_aligned_range(first, last))
            ticks, state, finished = self._fit(ticks, candidate, period, span, state)
            if finished:
                break
        return GeneratedTicks(state, ticks)

    def _fit(
        self,
        ticks: list[Timestamp],
        candidate: list[Timestamp],
        period: Period,
        span: Span,
        state: TimestampFormat,
    ) -> tuple[list[Timestamp], TimestampFormat, bool]:
        for sample in range(1, len(candidate) + 1):
            sampled = self.merge_ticks(ticks, candidate, sample)
            state = self._state(period)
            used = span.consumed(state, sampled)
            if used <= span.length():
                # Stop once sampling was needed or this period already fills over half
                return sampled, state, sample != 1 or used > span.length() / 2.0
            if len(sampled) == 1:
                # Not even one label fits: smaller periods will not either
                return ticks, state, True
        return ticks, state, False

    @staticmethod
    def merge_ticks(existing: Sequence[T], candidate: Sequence[T], sample: int) -> list[T]:
        """Merge a sample of sorted ``candidate`` ticks into ``existing``, sorted and deduplicated."""
        if sample <= 0:
            raise ValueError("sample must be positive")
        candidate = list(candidate)

        def found(tick: T) -> Optional[int]:
            index = bisect_left(candidate, tick)
            if index < len(candidate) and candidate[index] == tick:
                return index
            return None

        common_index = next(
            (index for index in map(found, existing) if index is not None), sample - 1
        )
        sampled = Timestamps.sample_ticks(candidate, common_index, sample)
        merged = sorted([*existing, *sampled])
        return [tick for tick, _ in groupby(merged)]

    @staticmethod
    def sample_ticks(ticks: Sequence[T], align_index: int, keep_every: int) -> list[T]:
        """Keep every ``keep_every``-th tick, chosen so that ``ticks[align_index]`` is kept."""
        if keep_every <= 0:
            raise ValueError("keep_every must be positive")
        keep = align_index % keep_every
        return [tick for index, tick in enumerate(ticks) if index % keep_every == keep]