"""Tests for the chromatic table and spelling resolution."""

import pytest

from transposition.base import MatchException, UnknownSpelling
from transposition.pitch import (
    CHROMATIC,
    PITCH_LOOKUP,
    SPELLING_LOOKUP,
    PitchClass,
    canonical,
    is_spelling,
    matches,
    resolve,
)


def test_chromatic_labels() -> None:
    assert CHROMATIC == [
        "C",
        "C♯/D♭",
        "D",
        "D♯/E♭",
        "E",
        "F",
        "F♯/G♭",
        "G",
        "G♯/A♭",
        "A",
        "A♯/B♭",
        "B",
    ]


def test_pitch_lookup_is_a_cycle() -> None:
    assert len(PITCH_LOOKUP) == 12
    for p in PitchClass:
        assert PITCH_LOOKUP[p.value] == p
        assert p.succ().pred() == p
    assert PitchClass.B.succ() == PitchClass.C
    assert PitchClass.C.pred() == PitchClass.B


@pytest.mark.parametrize(
    "pitch, steps, expected",
    [
        (PitchClass.C, 0, PitchClass.C),
        (PitchClass.C, 1, PitchClass.Cs),
        (PitchClass.C, -1, PitchClass.B),
        (PitchClass.A, 3, PitchClass.C),
        (PitchClass.D, -14, PitchClass.C),
        (PitchClass.E, 24, PitchClass.E),
        (PitchClass.G, -127, PitchClass.C),
    ],
)
def test_add_steps(pitch: PitchClass, steps: int, expected: PitchClass) -> None:
    assert pitch.add_steps(steps) == expected


@pytest.mark.parametrize(
    "spelling, expected",
    [
        ("C", PitchClass.C),
        ("C♯", PitchClass.Cs),
        ("D♭", PitchClass.Cs),
        ("C♯/D♭", PitchClass.Cs),
        ("E♭", PitchClass.Ds),
        ("D♯", PitchClass.Ds),
        ("F♯/G♭", PitchClass.Fs),
        ("G♭", PitchClass.Fs),
        ("A♭", PitchClass.Gs),
        ("B♭", PitchClass.As),
        ("A♯/B♭", PitchClass.As),
        ("B", PitchClass.B),
    ],
)
def test_resolve(spelling: str, expected: PitchClass) -> None:
    assert resolve(spelling) == expected
    assert is_spelling(spelling)


@pytest.mark.parametrize(
    "spelling",
    ["", "c", "H", "C#", "Db", "Bb", "C♭", "E♯", "D♭/C♯", "C♯/", "/D♭", " C", "C♯/D♭/C♯"],
)
def test_resolve_unknown(spelling: str) -> None:
    assert not is_spelling(spelling)
    with pytest.raises(UnknownSpelling) as info:
        resolve(spelling)
    assert info.value.value == spelling
    assert isinstance(info.value, MatchException)


def test_spelling_lookup_size() -> None:
    # 7 naturals, 5 sharps, 5 flats, 5 compound labels
    assert len(SPELLING_LOOKUP) == 22


def test_matches() -> None:
    assert matches("C♯", PitchClass.Cs)
    assert matches("D♭", PitchClass.Cs)
    assert matches("C♯/D♭", PitchClass.Cs)
    assert matches("C", PitchClass.C)
    assert not matches("C", PitchClass.Cs)
    assert not matches("D♭/C♯", PitchClass.Cs)


def test_canonical() -> None:
    assert canonical("G♭") == "F♯/G♭"
    assert canonical("F♯/G♭") == "F♯/G♭"
    assert canonical("E") == "E"
    for label in CHROMATIC:
        assert canonical(label) == label
