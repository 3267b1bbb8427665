import pytest

from transposition.base import UnknownSpelling
from transposition.instrument import INSTRUMENT_KEYS, InstrumentKey
from transposition.pitch import PitchClass, resolve


def test_instrument_keys() -> None:
    assert INSTRUMENT_KEYS == ["C", "D", "E♭", "E", "F", "A", "B♭", "B"]
    assert len(set(INSTRUMENT_KEYS)) == 8


def test_instrument_pitches_match_spellings() -> None:
    for key in InstrumentKey:
        assert resolve(key.spelling) == key.pitch
        assert key.examples
    assert InstrumentKey.Bb.pitch == PitchClass.As


def test_parse() -> None:
    assert InstrumentKey.parse("B♭") == InstrumentKey.Bb
    assert InstrumentKey.parse("E♭") == InstrumentKey.Eb


@pytest.mark.parametrize("spelling", ["G", "D♯", "A♯/B♭", "Bb", "", "c"])
def test_parse_rejects_other_spellings(spelling: str) -> None:
    with pytest.raises(UnknownSpelling):
        InstrumentKey.parse(spelling)
