import math
import sys

import pytest

from chartticks.aligned_floats import AlignedFloats, FloatFormat, scale10
from chartticks.base import GeneratedTicks
from chartticks.span import HorizontalSpan

F64_MAX = sys.float_info.max
F64_MIN = -sys.float_info.max
F64_MIN_POSITIVE = sys.float_info.min
MAX_10_EXP = sys.float_info.max_10_exp


def mk_span(width):
    return HorizontalSpan(1.0, 0, 0.0, width + 0.1, HorizontalSpan.identity_format())


def assert_precision(first, last, width, scale, count):
    span = mk_span(width + 1.0)
    assert AlignedFloats.find_precision(first, last, span) == (scale, count)


def assert_ticks(first, last, scale, count, expected):
    scale, ticks = AlignedFloats.generate_count(first, last, scale, count)
    state = FloatFormat(scale)
    assert [state.format(tick) for tick in ticks] == expected


@pytest.mark.parametrize(
    "first, last, width, scale, count",
    [
        (0.0, 1.0, 3.0 * 3.0, -1, 3),
        (0.0, 1.0, 6.0 * 3.0, -1, 6),
        (0.0, 1.0, 11.0 * 3.0, -1, 11),
        (0.0, 1.0, 12.0 * 4.0, -2, 12),
        (0.0, 1.0, 21.0 * 4.0, -2, 21),
        (0.0, 1000.0, 3.0 * 4.0, 2, 3),
        (-100_000.0, 100_000.0, 3.0 * 7.0, 4, 3),
        (0.0, 1.0, 3.0, -1, 1),
        (123.0, 133.0, 3.0, 0, 1),
        (0.0, 100_000.0, 6.0, 4, 1),
        (1.234_567, 2.987_654, 3.0, -1, 1),
    ],
)
def test_find_precision(first, last, width, scale, count):
    assert_precision(first, last, width, scale, count)


def test_no_range():
    assert_ticks(0.0, 0.0, -1, 5, ["0.0"])


@pytest.mark.parametrize(
    "first, last, scale, count, expected",
    [
        (0.0, 1.0, -1, 3, ["0.0", "0.5", "1.0"]),
        (0.0, 1.0, -1, 6, ["0.0", "0.2", "0.4", "0.6", "0.8", "1.0"]),
        (
            0.0,
            1.0,
            -1,
            11,
            ["0.0", "0.1", "0.2", "0.3", "0.4", "0.5", "0.6", "0.7", "0.8", "0.9", "1.0"],
        ),
        (
            0.0,
            1.0,
            -2,
            12,
            [
                "0.00", "0.09", "0.18", "0.27", "0.36", "0.45",
                "0.55", "0.64", "0.73", "0.82", "0.91", "1.00",
            ],
        ),
        (
            0.0,
            1.0,
            -2,
            21,
            [
                "0.00", "0.05", "0.10", "0.15", "0.20", "0.25", "0.30",
                "0.35", "0.40", "0.45", "0.50", "0.55", "0.60", "0.65",
                "0.70", "0.75", "0.80", "0.85", "0.90", "0.95", "1.00",
            ],
        ),
        (0.0, 1000.0, 2, 3, ["0", "500", "1000"]),
        (-100_000.0, 100_000.0, 4, 3, ["-100000", "0", "100000"]),
        (0.0, 1.0, -1, 1, ["0.5"]),
        (123.0, 133.0, 0, 1, ["128"]),
        (0.0, 100_000.0, 4, 1, ["50000"]),
        (1.234_567, 2.987_654, -1, 1, ["2.1"]),
    ],
)
def test_generate(first, last, scale, count, expected):
    assert_ticks(first, last, scale, count, expected)


def test_nil():
    assert_ticks(math.nan, math.nan, 1, 3, ["-", "-", "-"])


def test_generate_large_range():
    assert_ticks(
        0.0,
        212801815895.28098,
        9,
        16,
        [
            "0",
            "14000000000",
            "28000000000",
            "42000000000",
            "56000000000",
            "70000000000",
            "85000000000",
            "99000000000",
            "113000000000",
            "127000000000",
            "141000000000",
            "156000000000",
            "170000000000",
            "184000000000",
            "198000000000",
            "212000000000",
        ],
    )


@pytest.mark.parametrize(
    "scale, value, expected",
    [
        (0, 1.0, "1"),
        (0, 1.23456789, "1"),
        (0, 123_456.123, "123456"),
        (1, 12.345_678, "10"),
        (1, 123_456.123_456, "123450"),
        (3, 123_456.123_456, "123000"),
        (8, 123_456_789.0, "100000000"),
        (1, 0.123_456_789, "0"),
        (10, 0.123_456_789, "0"),
        (-1, 0.123_456_789, "0.1"),
        (-5, 0.123_456_789, "0.12346"),
        (-5, 0.123_44, "0.12344"),
        (0, -1.0, "-1"),
        (3, -123_456.789, "-123000"),
        (-3, -123_456.789123, "-123456.789"),
        (1, -0.123_456_789, "-0"),
        (6, 123_456.123_456, "100000"),
        (6, -123_456.123_456, "-100000"),
        (5, 123_456.123_456, "100000"),
        (9, 123_456.123_456, "100000"),
        (-3, F64_MIN_POSITIVE, "0.000"),
        (3, F64_MIN_POSITIVE, "0"),
    ],
)
def test_format(scale, value, expected):
    assert FloatFormat(scale).format(value) == expected


def test_format_extremes():
    v = FloatFormat(3).format(F64_MAX)
    assert v.startswith("1797")
    assert v.endswith("858000")
    assert len(v) == MAX_10_EXP + 1
    v = FloatFormat(3).format(F64_MIN)
    assert v.startswith("-1797")
    assert v.endswith("858000")
    assert len(v) == MAX_10_EXP + 2


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.0, 0),
        (-1.0, 0),
        (0.0, 0),
        (10.0, 1),
        (100.0, 2),
        (55.0, 1),
        (1_123_567.789_654_321, 6),
        (-1_123_567.789_654_321, 6),
        (0.1, -1),
        (0.01, -2),
        (0.55, -1),
        (0.000_000_009_123, -9),
        (F64_MAX, 308),
        (F64_MIN, 308),
        (F64_MIN_POSITIVE, -308),
    ],
)
def test_scale(value, expected):
    assert scale10(value) == expected


def test_generator_combines_precision_and_ticks():
    result = AlignedFloats().generate(0.0, 1.0, mk_span(3.0 * 3.0 + 1.0))
    assert result.labels() == ["0.0", "0.5", "1.0"]
    assert result.state == FloatFormat(-1)


def test_generator_result_equality_uses_ticks():
    span = mk_span(21.0 * 4.0 + 1.0)
    a = AlignedFloats().generate(0.0, 1.0, span)
    b = AlignedFloats().generate(0.0, 1.0, span)
    assert a == b
    assert isinstance(a, GeneratedTicks)
    assert len(a.ticks) == 21
    assert a.ticks[0] == 0.0 and a.ticks[-1] == 1.0