"""Shortest-path semitone intervals between pitch classes.

The interval between two spellings is the signed number of semitones along
the shorter way round the chromatic cycle: positive going up, negative going
down. The tritone is six semitones either way and is always reported as
ascending, so ``interval(a, b)`` and ``interval(b, a)`` are both ``+6`` there.
"""

from enum import Enum, unique

from transposition.pitch import MAX_PITCHES, matches, resolve

TRITONE = MAX_PITCHES // 2
"""Semitones in a tritone, the one interval equally short both ways."""


@unique
class IntervalQuality(Enum):
    """Names of the simple intervals, indexed by semitone magnitude."""

    Unison = 0
    Minor2nd = 1
    Major2nd = 2
    Minor3rd = 3
    Major3rd = 4
    Perfect4th = 5
    Augmented4th = 6
    Perfect5th = 7
    Minor6th = 8
    Major6th = 9
    Minor7th = 10
    Major7th = 11
    Octave = 12

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. "Major 2nd"."""
        return _QUALITY_NAMES[self]

    @staticmethod
    def of(semitones: int) -> "IntervalQuality":
        """Look up the quality for a signed semitone count.

        Args:
            semitones: Signed interval; only the magnitude is used.

        Returns:
            The quality for ``abs(semitones)``.

        Raises:
            ValueError: If the magnitude is larger than an octave.
        """
        return IntervalQuality(abs(semitones))


_QUALITY_NAMES = {
    IntervalQuality.Unison: "Unison",
    IntervalQuality.Minor2nd: "Minor 2nd",
    IntervalQuality.Major2nd: "Major 2nd",
    IntervalQuality.Minor3rd: "Minor 3rd",
    IntervalQuality.Major3rd: "Major 3rd",
    IntervalQuality.Perfect4th: "Perfect 4th",
    IntervalQuality.Augmented4th: "Augmented 4th",
    IntervalQuality.Perfect5th: "Perfect 5th",
    IntervalQuality.Minor6th: "Minor 6th",
    IntervalQuality.Major6th: "Major 6th",
    IntervalQuality.Minor7th: "Minor 7th",
    IntervalQuality.Major7th: "Major 7th",
    IntervalQuality.Octave: "Octave",
}
assert len(_QUALITY_NAMES) == len(IntervalQuality)


@unique
class Direction(Enum):
    """Which way a transposition moves written pitch."""

    Up = "up"
    Down = "down"
    Unison = "unison"

    @staticmethod
    def of(offset: int) -> "Direction":
        if offset > 0:
            return Direction.Up
        elif offset < 0:
            return Direction.Down
        else:
            return Direction.Unison


def interval(source: str, target: str) -> int:
    """Compute the signed shortest interval from one spelling to another.

    Walks the chromatic cycle upward and downward from the source until a
    pitch class matching the target spelling is reached, and returns the
    shorter walk. Ties (the tritone) resolve upward.

    Args:
        source: Spelling of the starting pitch class.
        target: Spelling of the destination pitch class.

    Returns:
        A semitone count in [-11, 11]; zero when both name the same class.

    Raises:
        UnknownSpelling: If either spelling resolves to no pitch class.
    """
    start = resolve(source)
    end = resolve(target)
    if source == target or start == end:
        return 0

    forward = 0
    pitch = start
    while True:
        forward += 1
        pitch = pitch.succ()
        if matches(target, pitch):
            break

    backward = 0
    pitch = start
    while True:
        backward += 1
        pitch = pitch.pred()
        if matches(target, pitch):
            break

    assert forward + backward == MAX_PITCHES
    if backward < forward:
        return -backward
    else:
        return forward


def describe(offset: int) -> str:
    """Describe a signed offset for display, e.g. "up a Major 2nd".

    Args:
        offset: Signed semitone offset.

    Returns:
        "unison" for zero, otherwise the direction and the interval name.
    """
    direction = Direction.of(offset)
    if direction == Direction.Unison:
        return direction.value
    quality = IntervalQuality.of(offset)
    article = "an" if quality.display_name[0] in "AEIOU" else "a"
    return f"{direction.value} {article} {quality.display_name}"
