"""Tests for transposing spellings around the chromatic cycle."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tests.transposition.hypo import configure_hypo, spelling_strategy
from transposition.base import UnknownSpelling
from transposition.pitch import CHROMATIC, PitchClass, canonical, resolve
from transposition.transpose import transpose, transpose_pitch

configure_hypo()


@pytest.mark.parametrize(
    "spelling, shift, expected",
    [
        ("C", -2, "A♯/B♭"),
        ("D", 2, "E"),
        ("C", 2, "D"),
        ("B", 1, "C"),
        ("C", -1, "B"),
        ("E", -3, "C♯/D♭"),
        ("D♭", 0, "C♯/D♭"),
        ("G♭", 1, "G"),
        ("A♯/B♭", 2, "C"),
        ("F", 13, "F♯/G♭"),
        ("F", -25, "E"),
    ],
)
def test_transpose(spelling: str, shift: int, expected: str) -> None:
    assert transpose(spelling, shift) == expected


def test_transpose_returns_canonical_labels() -> None:
    for label in CHROMATIC:
        for shift in range(-12, 13):
            assert transpose(label, shift) in CHROMATIC


def test_transpose_unknown_spelling() -> None:
    with pytest.raises(UnknownSpelling):
        transpose("C♭", 1)


def test_transpose_pitch() -> None:
    assert transpose_pitch(PitchClass.As, 2) == PitchClass.C
    assert transpose_pitch(PitchClass.C, -6) == PitchClass.Fs


@given(spelling_strategy(), st.integers(min_value=-1000, max_value=1000))
def test_transpose_closure(spelling: str, shift: int) -> None:
    expected = (resolve(spelling).value + shift) % 12
    assert resolve(transpose(spelling, shift)).value == expected


@given(spelling_strategy(), st.integers(min_value=-1000, max_value=1000))
def test_transpose_round_trip(spelling: str, shift: int) -> None:
    there = transpose(spelling, shift)
    back = transpose(there, -shift)
    assert resolve(back) == resolve(spelling)


@given(spelling_strategy())
def test_transpose_by_zero_is_canonical(spelling: str) -> None:
    assert transpose(spelling, 0) == canonical(spelling)
