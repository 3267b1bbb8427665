"""Keys of transposing instruments.

An instrument's key is the concert pitch it sounds when it reads a written C:
a B♭ trumpet playing a written C sounds a concert B♭. Only the eight keys
common in band and orchestral writing are accepted.
"""

from enum import Enum, unique
from typing import Dict, List, Tuple

from transposition.base import UnknownSpelling
from transposition.pitch import PitchClass


@unique
class InstrumentKey(Enum):
    """The eight accepted instrument keys, valued by their spelling."""

    C = "C"
    D = "D"
    Eb = "E♭"
    E = "E"
    F = "F"
    A = "A"
    Bb = "B♭"
    B = "B"

    @property
    def spelling(self) -> str:
        return self.value

    @property
    def pitch(self) -> PitchClass:
        """The concert pitch class sounded by a written C."""
        return _PITCHES[self]

    @property
    def examples(self) -> Tuple[str, ...]:
        """Common instruments pitched in this key."""
        return _EXAMPLES[self]

    @staticmethod
    def parse(spelling: str) -> "InstrumentKey":
        """Parse one of the eight instrument key spellings.

        Raises:
            UnknownSpelling: If the spelling is not an accepted instrument
                key, even when it is a valid note name such as "G".
        """
        try:
            return InstrumentKey(spelling)
        except ValueError:
            raise UnknownSpelling(spelling) from None


_PITCHES: Dict[InstrumentKey, PitchClass] = {
    InstrumentKey.C: PitchClass.C,
    InstrumentKey.D: PitchClass.D,
    InstrumentKey.Eb: PitchClass.Ds,
    InstrumentKey.E: PitchClass.E,
    InstrumentKey.F: PitchClass.F,
    InstrumentKey.A: PitchClass.A,
    InstrumentKey.Bb: PitchClass.As,
    InstrumentKey.B: PitchClass.B,
}

_EXAMPLES: Dict[InstrumentKey, Tuple[str, ...]] = {
    InstrumentKey.C: ("Flute", "Oboe", "Piano", "Violin"),
    InstrumentKey.D: ("D Trumpet",),
    InstrumentKey.Eb: ("Alto Saxophone", "Baritone Saxophone", "E♭ Clarinet"),
    InstrumentKey.E: ("E Horn",),
    InstrumentKey.F: ("French Horn", "Cor Anglais"),
    InstrumentKey.A: ("A Clarinet",),
    InstrumentKey.Bb: ("Trumpet", "Clarinet", "Tenor Saxophone"),
    InstrumentKey.B: ("B Horn",),
}

INSTRUMENT_KEYS: List[str] = [k.spelling for k in InstrumentKey]
"""The accepted instrument key spellings, in menu order."""
