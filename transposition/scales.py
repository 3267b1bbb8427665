"""Scales offered for practice.

Each practice scale has a name, the range it is played over and, where it
belongs to a key, the sharp and flat counts of that key. Scales are grouped
by family so a practice session can pick at random from the families chosen.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, unique
from typing import Iterable, Optional

from transposition.keys import describe_accidentals

TWO_OCTAVES = "2 octaves"
TWELFTH = "12th"


@unique
class ScaleFamily(Enum):
    """Groups of practice scales."""

    Major = "Major"
    HarmonicMinor = "Harmonic Minor"
    MelodicMinor = "Melodic Minor"
    Chromatic = "Chromatic"
    Pentatonic = "Pentatonic"
    Dominant7th = "Dominant 7th"
    Diminished7th = "Diminished 7th"


@dataclass(frozen=True)
class PracticeScale:
    """A scale to practise over a fixed range."""

    name: str
    range: str
    sharps: Optional[int] = None
    flats: Optional[int] = None

    @property
    def key_signature(self) -> Optional[str]:
        """The key signature in words, or None if the scale has no key."""
        if self.sharps is None or self.flats is None:
            return None
        return describe_accidentals(self.sharps, self.flats)


def _keyed(
    suffix: str, entries: Iterable[tuple[str, str, int, int]], prefix: str = ""
) -> tuple[PracticeScale, ...]:
    return tuple(
        PracticeScale(f"{prefix}{tonic}{suffix}", rng, sharps, flats)
        for tonic, rng, sharps, flats in entries
    )


def _unkeyed(prefix: str, entries: Iterable[tuple[str, str]]) -> tuple[PracticeScale, ...]:
    return tuple(PracticeScale(f"{prefix}{tonic}", rng) for tonic, rng in entries)


SCALES: dict[ScaleFamily, tuple[PracticeScale, ...]] = {
    ScaleFamily.Major: _keyed(
        " Major",
        [
            ("C", TWO_OCTAVES, 0, 0),
            ("G", TWELFTH, 1, 0),
            ("D", TWELFTH, 2, 0),
            ("A", TWO_OCTAVES, 3, 0),
            ("E", TWELFTH, 4, 0),
            ("B", TWO_OCTAVES, 5, 0),
            ("F#", TWO_OCTAVES, 6, 0),
            ("F", TWELFTH, 0, 1),
            ("Bb", TWO_OCTAVES, 0, 2),
            ("Eb", TWELFTH, 0, 3),
            ("Ab", TWO_OCTAVES, 0, 4),
            ("Db", TWELFTH, 0, 5),
            ("Gb", TWELFTH, 0, 6),
        ],
    ),
    ScaleFamily.HarmonicMinor: _keyed(
        " Harmonic Minor",
        [
            ("A", TWO_OCTAVES, 0, 0),
            ("E", TWELFTH, 1, 0),
            ("B", TWO_OCTAVES, 2, 0),
            ("F#", TWO_OCTAVES, 3, 0),
            ("C#", TWO_OCTAVES, 4, 0),
            ("G#", TWELFTH, 5, 0),
            ("D#", TWELFTH, 6, 0),
            ("D", TWELFTH, 0, 1),
            ("G", TWELFTH, 0, 2),
            ("C", TWO_OCTAVES, 0, 3),
            ("F", TWELFTH, 0, 4),
            ("Bb", TWO_OCTAVES, 0, 5),
            ("Eb", TWO_OCTAVES, 0, 6),
        ],
    ),
    ScaleFamily.MelodicMinor: _keyed(
        " Melodic Minor",
        [
            ("A", TWO_OCTAVES, 0, 0),
            ("E", TWELFTH, 1, 0),
            ("B", TWO_OCTAVES, 2, 0),
            ("F#", TWO_OCTAVES, 3, 0),
            ("C#", TWO_OCTAVES, 4, 0),
            ("G#", TWELFTH, 5, 0),
            ("D#", TWELFTH, 6, 0),
            ("D", TWELFTH, 0, 1),
            ("G", TWELFTH, 0, 2),
            ("C", TWO_OCTAVES, 0, 3),
            ("F", TWELFTH, 0, 4),
            ("Bb", TWO_OCTAVES, 0, 5),
            ("Eb", TWO_OCTAVES, 0, 6),
        ],
    ),
    ScaleFamily.Chromatic: _unkeyed(
        "Chromatic scale starting on ",
        [(tonic, TWO_OCTAVES) for tonic in ["C", "B", "F#", "A", "Bb", "G", "Ab"]],
    ),
    ScaleFamily.Pentatonic: _keyed(
        " Pentatonic",
        [
            ("C", TWO_OCTAVES, 0, 0),
            ("G", TWO_OCTAVES, 1, 0),
            ("D", TWELFTH, 2, 0),
            ("A", TWO_OCTAVES, 3, 0),
            ("E", TWELFTH, 4, 0),
            ("B", TWO_OCTAVES, 5, 0),
            ("F#", TWO_OCTAVES, 6, 0),
            ("F", TWELFTH, 0, 1),
            ("Bb", TWO_OCTAVES, 0, 2),
            ("Eb", TWELFTH, 0, 3),
            ("Ab", TWO_OCTAVES, 0, 4),
            ("Db", TWELFTH, 0, 5),
            ("Gb", TWELFTH, 0, 6),
        ],
    ),
    ScaleFamily.Dominant7th: _keyed(
        "",
        [
            ("C", TWO_OCTAVES, 0, 0),
            ("G", TWELFTH, 1, 0),
            ("D", TWO_OCTAVES, 2, 0),
            ("A", TWELFTH, 3, 0),
            ("E", TWELFTH, 4, 0),
            ("B", TWO_OCTAVES, 5, 0),
            ("F#", TWO_OCTAVES, 6, 0),
            ("Bb", TWELFTH, 0, 2),
            ("Eb", TWO_OCTAVES, 0, 3),
            ("Ab", TWELFTH, 0, 4),
            ("Db", TWO_OCTAVES, 0, 5),
            ("Gb", TWELFTH, 0, 6),
        ],
        prefix="Dominant 7th in the key of ",
    ),
    ScaleFamily.Diminished7th: _unkeyed(
        "Diminished 7th starting on ",
        [(tonic, TWO_OCTAVES) for tonic in ["G", "A", "G#", "Bb", "F#", "B", "C"]],
    ),
}
"""Practice scales by family."""


def scales_for(families: Iterable[ScaleFamily]) -> list[PracticeScale]:
    """All practice scales in the given families, in catalog order."""
    wanted = set(families)
    return [s for family, scales in SCALES.items() if family in wanted for s in scales]


def pick_scale(
    families: Iterable[ScaleFamily], rng: Optional[random.Random] = None
) -> PracticeScale:
    """Pick a practice scale uniformly from the given families.

    Args:
        families: The families to choose from.
        rng: Source of randomness; a fresh ``random.Random`` if omitted.

    Returns:
        One scale from the selected families.

    Raises:
        ValueError: If no families are selected.
    """
    candidates = scales_for(families)
    if not candidates:
        raise ValueError("No scale families selected")
    if rng is None:
        rng = random.Random()
    return rng.choice(candidates)
