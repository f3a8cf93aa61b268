from chartticks.base import Format, NilFormat
from chartticks.span import HorizontalSpan, VerticalSpan


class _Str(Format):
    def format(self, value):
        return str(value)


def _span(min_chars=0, padding=0.0, fmt=None):
    return HorizontalSpan(
        1.0, min_chars, padding, 50.0, fmt or HorizontalSpan.identity_format()
    )


def test_vertical_length():
    assert VerticalSpan(12.0, 300.0).length() == 300.0


def test_vertical_consumed_pinned():
    assert VerticalSpan(10.0, 100.0).consumed(NilFormat(), [1, 2, 3]) == 30.0


def test_vertical_consumed_empty():
    assert VerticalSpan(10.0, 100.0).consumed(NilFormat(), []) == 0


def test_horizontal_length():
    assert _span().length() == 50.0


def test_horizontal_empty_consumes_nothing():
    assert _span(min_chars=4, padding=2.0).consumed(_Str(), []) == 0


def test_horizontal_widest_label_pinned():
    # Widest label "1000" is 4 chars, two ticks.
    assert _span().consumed(_Str(), [1, 1000]) == 8.0


def test_horizontal_scales_with_tick_count():
    span = _span(padding=1.5)
    one = span.consumed(_Str(), [42])
    assert span.consumed(_Str(), [42, 42, 42]) == one * 3


def test_horizontal_min_chars_widens():
    narrow = _span(min_chars=0).consumed(_Str(), [7, 8])
    wide = _span(min_chars=10).consumed(_Str(), [7, 8])
    assert wide > narrow


def test_horizontal_padding_widens():
    without = _span(padding=0.0).consumed(_Str(), [7])
    with_padding = _span(padding=3.0).consumed(_Str(), [7])
    assert with_padding > without


def test_identity_format_defers_to_state():
    fmt = HorizontalSpan.identity_format()
    assert fmt(5, _Str()) == "5"
    assert fmt(5, NilFormat()) == "-"


def test_custom_label_function_is_used():
    long_label = _span(fmt=lambda tick, state: "x" * 20)
    short_label = _span()
    assert long_label.consumed(_Str(), [1]) > short_label.consumed(_Str(), [1])