import pytest

from chartticks.base import Format, GeneratedTicks, Generator, NilFormat, Span


class _Upper(Format):
    def format(self, value):
        return str(value).upper()


def test_nil_format_returns_dash():
    assert NilFormat().format(123) == "-"
    assert NilFormat().format("anything") == "-"


def test_none_is_empty():
    ticks = GeneratedTicks.none()
    assert ticks.ticks == []
    assert ticks.labels() == []
    assert isinstance(ticks.state, NilFormat)


def test_labels_use_state():
    ticks = GeneratedTicks(_Upper(), ["a", "bc"])
    assert ticks.labels() == ["A", "BC"]


def test_equality_compares_ticks_only():
    a = GeneratedTicks(_Upper(), [1, 2, 3])
    b = GeneratedTicks(NilFormat(), [1, 2, 3])
    c = GeneratedTicks(_Upper(), [1, 2])
    assert a == b
    assert a != c
    assert GeneratedTicks.none() == GeneratedTicks(_Upper(), [])


def test_equality_with_other_type():
    assert (GeneratedTicks.none() == []) is False


@pytest.mark.parametrize("abstract", [Format, Span, Generator])
def test_abstract_classes_cannot_be_instantiated(abstract):
    with pytest.raises(TypeError):
        abstract()