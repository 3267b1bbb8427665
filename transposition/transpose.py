"""Shift spellings around the chromatic cycle."""

from transposition.pitch import PitchClass, resolve


def transpose_pitch(pitch: PitchClass, shift: int) -> PitchClass:
    """Shift a pitch class by a signed number of semitones."""
    return pitch.add_steps(shift)


def transpose(spelling: str, shift: int) -> str:
    """Transpose a spelling and return the canonical label of the result.

    Args:
        spelling: Any accepted spelling of the starting pitch class.
        shift: Signed semitone shift; any integer, wrapped mod 12.

    Returns:
        The canonical label of the shifted pitch class, compound "X/Y" when
        that class has two names.

    Raises:
        UnknownSpelling: If the spelling resolves to no pitch class.
    """
    return transpose_pitch(resolve(spelling), shift).canonical
