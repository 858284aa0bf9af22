"""Tests for the codepoint range value type and validity predicate."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mutable_string.core.ranges import Range, is_valid_range


def test_range_keeps_inverted_and_negative_bounds() -> None:
    inverted = Range(5, 3)
    negative = Range(-2, 1)

    assert inverted.to_tuple() == (5, 3)
    assert negative.pos == -2
    assert inverted.length == -2


def test_range_rejects_non_integer_bounds() -> None:
    with pytest.raises(TypeError, match="pos must be an integer"):
        Range(1.5, 3)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="end must be an integer"):
        Range(0, "3")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Range(True, 3)


def test_range_behaves_like_a_pair() -> None:
    span = Range(2, 7)
    pos, end = span

    assert (pos, end) == (2, 7)
    assert len(span) == 2
    assert span[1] == 7
    assert span[:] == (2, 7)
    assert span.to_dict() == {"pos": 2, "end": 7}
    with pytest.raises(IndexError):
        span[2]


def test_empty_range_is_an_insertion_point() -> None:
    assert Range.at(4).is_empty
    assert Range.at(4).length == 0
    assert not Range(4, 5).is_empty


@pytest.mark.parametrize(
    "value",
    [
        Range(1, 4),
        (1, 4),
        [1, 4],
        {"pos": 1, "end": 4},
        {"start": 1, "end": 4},
        SimpleNamespace(pos=1, end=4),
        SimpleNamespace(start=1, end=4),
    ],
)
def test_from_value_accepts_common_shapes(value: object) -> None:
    assert Range.from_value(value) == Range(1, 4)


def test_from_value_rejects_malformed_input() -> None:
    with pytest.raises(ValueError, match="exactly two entries"):
        Range.from_value((1, 2, 3))
    with pytest.raises(ValueError, match="pos and end"):
        Range.from_value({"pos": 1})
    with pytest.raises(ValueError, match="required"):
        Range.from_value(None)
    with pytest.raises(TypeError, match="Unsupported"):
        Range.from_value("0:4")


@pytest.mark.parametrize(
    ("span", "text", "expected"),
    [
        (Range(0, 5), "hello world", True),
        (Range(0, 11), "hello world", True),
        (Range(11, 11), "hello world", True),
        (Range(3, 3), "hello world", True),
        (Range(5, 3), "hello world", False),
        (Range(-1, 3), "hello world", False),
        (Range(0, 12), "hello world", False),
        (Range(0, 0), "", True),
        (Range(0, 1), "", False),
        (Range(1, 1), "", False),
    ],
)
def test_is_valid_range(span: Range, text: str, expected: bool) -> None:
    assert is_valid_range(span, len(text)) is expected
    assert span.is_valid_for(len(text)) is expected


@given(
    pos=st.integers(min_value=-50, max_value=50),
    end=st.integers(min_value=-50, max_value=50),
    length=st.integers(min_value=0, max_value=50),
)
def test_is_valid_range_matches_bounds_check(pos: int, end: int, length: int) -> None:
    assert is_valid_range(Range(pos, end), length) == (0 <= pos <= end <= length)
