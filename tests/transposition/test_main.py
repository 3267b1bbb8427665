"""Tests for the command line."""

import pytest

from transposition.main import format_result, main, normalize_spelling
from transposition.plan import plan_transposition


@pytest.mark.parametrize(
    "typed, expected",
    [
        ("Bb", "B♭"),
        ("F#", "F♯"),
        ("C#/Db", "C♯/D♭"),
        ("B", "B"),
        ("E♭", "E♭"),
        ("b", "b"),
        ("H#", "H#"),
    ],
)
def test_normalize_spelling(typed: str, expected: str) -> None:
    assert normalize_spelling(typed) == expected


def test_format_result() -> None:
    lines = format_result(plan_transposition("C", "B♭", key_name="F", note="C"))
    assert lines == [
        "Transposing up a Major 2nd",
        "Transposed key signature: G (1 sharp)",
        "Transposed note: D",
    ]
    assert format_result(plan_transposition("E", "E", note="C")) == [
        "No transposition needed, keys are in unison"
    ]


def test_main_plan(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["plan", "--source", "C", "--target", "Bb", "--key", "Eb", "--note", "D"])
    assert code == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Transposing up a Major 2nd",
        "Transposed key signature: F (1 flat)",
        "Transposed note: E",
    ]


def test_main_plan_unknown_instrument(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["plan", "--source", "G", "--target", "C"]) == 2
    assert capsys.readouterr().out == ""


def test_main_signature(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["signature", "F#/Gb"]) == 0
    assert capsys.readouterr().out.strip() == "F♯/G♭: 6 sharps/6 flats"
    assert main(["signature", "H"]) == 2


def test_main_fifths(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["fifths"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 12
    assert out[0] == "G (1 sharp), relative minor E"
    assert out[4] == "B/C♭ (5 sharps/7 flats), relative minor G♯"


def test_main_scales(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["scales", "--family", "Chromatic"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Chromatic scale starting on C (2 octaves)"
    assert len(out) == 7
    assert main(["scales", "--family", "Major", "--pick", "--seed", "3"]) == 0
    picked = capsys.readouterr().out.splitlines()
    assert len(picked) == 1
    assert " Major (" in picked[0]


def test_main_instruments(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["instruments"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 8
    assert out[6].startswith("B♭: Trumpet")
