import pytest

from beamparse.spans import Span


def test_invalid_span():
    with pytest.raises(ValueError):
        Span(3, 2)


def test_contains():
    outer = Span(0, 10)
    assert outer.contains(Span(2, 5))
    assert outer.contains(Span(0, 10))
    assert not outer.contains(Span(5, 11))
    assert outer.contains(0)
    assert not outer.contains(10)


def test_intersects_and_crosses():
    span = Span(2, 6)
    assert span.intersects(Span(4, 8))
    assert span.crosses(Span(4, 8))
    assert span.intersects(Span(3, 4))
    assert not span.crosses(Span(3, 4))
    assert not span.intersects(Span(6, 8))


def test_ordering_and_str():
    assert sorted([Span(3, 4), Span(0, 5), Span(0, 2)]) == [Span(0, 2), Span(0, 5), Span(3, 4)]
    assert Span(1, 4).length == 3
    assert str(Span(1, 4)) == '1..4'
