import pytest
from hypothesis import given
from hypothesis import strategies as st

from edecl.spans import FullSpan, PartialSpanned, Span, Spanned


def test_at_is_empty():
    span = Span.at(7)
    assert span.start == span.end == 7
    assert len(span) == 0


@given(st.integers(min_value=0, max_value=10_000), st.integers(min_value=0, max_value=10_000))
def test_with_len_keeps_start(start, length):
    span = Span.at(start).with_len(length)
    assert span.start == start
    assert len(span) == length


@given(st.integers(min_value=0, max_value=500), st.integers(min_value=0, max_value=500))
def test_range_matches_bounds(start, length):
    span = Span(start, start + length)
    assert list(span.range()) == list(range(start, start + length))
    assert len(span.range()) == len(span)


def test_negative_start_rejected():
    with pytest.raises(ValueError):
        Span(-1, 3)


def test_end_before_start_rejected():
    with pytest.raises(ValueError):
        Span(5, 2)


def test_spans_compare_by_value():
    assert Span(1, 4) == Span(1, 4)
    assert Span(1, 4) != Span(1, 5)


def test_partial_spanned_map_keeps_span():
    item = PartialSpanned("abc", Span(2, 5))
    mapped = item.map(str.upper)
    assert mapped.data == "ABC"
    assert mapped.span == Span(2, 5)


def test_partial_spanned_with_file():
    item = PartialSpanned(10, Span(0, 2))
    full = item.with_file(3)
    assert full == Spanned(10, FullSpan(Span(0, 2), 3))


def test_spanned_map_keeps_span():
    full_span = FullSpan(Span(1, 2), 0)
    item = Spanned([1, 2], full_span)
    mapped = item.map(len)
    assert mapped.data == 2
    assert mapped.span is full_span