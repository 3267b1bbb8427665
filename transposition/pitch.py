"""Pitch classes and enharmonic spelling resolution.

This module holds the fixed twelve-entry chromatic table that the rest of the
engine is built on. Each pitch class has one or two written names: naturals
have one, the five black-key classes have a sharp and a flat spelling and are
displayed as a compound "X/Y" label (sharp first). Any of those forms is an
accepted spelling of the class.

Matching is exact. The accidental glyphs are the Unicode sharp and flat signs
(``♯`` and ``♭``); "C#", "Db" or "c" are not spellings.
"""

from enum import Enum, unique
from typing import Dict, List, Tuple

from transposition.base import UnknownSpelling

SHARP = "♯"
"""The sharp accidental glyph."""

FLAT = "♭"
"""The flat accidental glyph."""

SEPARATOR = "/"
"""Separator between the two names of a compound spelling."""

MAX_PITCHES = 12
"""Number of pitch classes in the chromatic cycle."""


@unique
class PitchClass(Enum):
    """Enumeration of the twelve chromatic pitch classes.

    Values are semitone offsets from C within an octave. Member names use
    ``s`` for sharp; the written spellings live in ``spellings``.
    """

    C = 0
    Cs = 1
    D = 2
    Ds = 3
    E = 4
    F = 5
    Fs = 6
    G = 7
    Gs = 8
    A = 9
    As = 10
    B = 11

    @property
    def spellings(self) -> Tuple[str, ...]:
        """The single written names of this pitch class, sharp name first."""
        return _SPELLINGS[self]

    @property
    def canonical(self) -> str:
        """The display label: the sole name, or "X/Y" for two names."""
        return SEPARATOR.join(self.spellings)

    def add_steps(self, steps: int) -> "PitchClass":
        """Add semitone steps to this pitch class.

        Args:
            steps: Number of semitones to add (can be negative).

        Returns:
            The pitch class reached after wrapping around the cycle.
        """
        return PITCH_LOOKUP[(self.value + steps) % MAX_PITCHES]

    def succ(self) -> "PitchClass":
        """The next pitch class going up by one semitone."""
        return self.add_steps(1)

    def pred(self) -> "PitchClass":
        """The next pitch class going down by one semitone."""
        return self.add_steps(-1)


_SPELLINGS: Dict[PitchClass, Tuple[str, ...]] = {
    PitchClass.C: ("C",),
    PitchClass.Cs: ("C" + SHARP, "D" + FLAT),
    PitchClass.D: ("D",),
    PitchClass.Ds: ("D" + SHARP, "E" + FLAT),
    PitchClass.E: ("E",),
    PitchClass.F: ("F",),
    PitchClass.Fs: ("F" + SHARP, "G" + FLAT),
    PitchClass.G: ("G",),
    PitchClass.Gs: ("G" + SHARP, "A" + FLAT),
    PitchClass.A: ("A",),
    PitchClass.As: ("A" + SHARP, "B" + FLAT),
    PitchClass.B: ("B",),
}


def _build_pitch_lookup() -> Dict[int, PitchClass]:
    d: Dict[int, PitchClass] = {}
    for p in PitchClass:
        d[p.value] = p
    assert len(d) == MAX_PITCHES
    return d


PITCH_LOOKUP = _build_pitch_lookup()
"""Lookup table from semitone offset (0-11) to PitchClass."""


def _build_spelling_lookup() -> Dict[str, PitchClass]:
    """Map every accepted spelling to its pitch class.

    Accepted forms are each single name and, for two-name classes, the
    compound label. Every pitch class must be reachable and no spelling may
    name two classes.
    """
    d: Dict[str, PitchClass] = {}
    for p in PitchClass:
        names = p.spellings
        assert 1 <= len(names) <= 2
        forms = list(names)
        if len(names) > 1:
            forms.append(p.canonical)
        for form in forms:
            assert form not in d
            d[form] = p
    return d


SPELLING_LOOKUP = _build_spelling_lookup()
"""Lookup table from every accepted spelling to its PitchClass."""

CHROMATIC: List[str] = [p.canonical for p in PitchClass]
"""The twelve canonical chromatic labels in ascending order from C.

This is the accepted set of note spellings offered to callers.
"""


def matches(spelling: str, pitch: PitchClass) -> bool:
    """Check whether a spelling names the given pitch class.

    A spelling matches if it equals the entry's sole name or, for a compound
    entry "X/Y", equals X, Y, or the full compound label.

    Args:
        spelling: The written name to test.
        pitch: The pitch class to test against.

    Returns:
        True if the spelling denotes this pitch class.
    """
    return spelling == pitch.canonical or spelling in pitch.spellings


def is_spelling(spelling: str) -> bool:
    """Check whether a string is an accepted spelling of some pitch class."""
    return spelling in SPELLING_LOOKUP


def resolve(spelling: str) -> PitchClass:
    """Resolve a spelling to its pitch class.

    Args:
        spelling: A natural, sharp, flat, or compound "X/Y" spelling.

    Returns:
        The pitch class the spelling denotes.

    Raises:
        UnknownSpelling: If no table entry matches the spelling.
    """
    pitch = SPELLING_LOOKUP.get(spelling)
    if pitch is None:
        raise UnknownSpelling(spelling)
    return pitch


def canonical(spelling: str) -> str:
    """Return the canonical display label for a spelling."""
    return resolve(spelling).canonical
