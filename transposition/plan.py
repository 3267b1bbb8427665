"""Plan a transposition between two transposing instruments.

Given the keys of a source and a target instrument, this module works out how
far written material must move so that the target instrument sounds the same
concert pitch, and re-spells an optional key signature and an optional note.

Written pitch moves opposite to the instruments' keys: going from a C
instrument to a B♭ instrument (a major second lower) raises the written part
by a major second.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from transposition.base import UnknownSpelling
from transposition.instrument import InstrumentKey
from transposition.interval import Direction, IntervalQuality, describe, interval
from transposition.keys import (
    dual_signature_of,
    key_name_for_pitch,
    lookup_key,
)
from transposition.pitch import CHROMATIC
from transposition.transpose import transpose, transpose_pitch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranspositionRequest:
    """The inputs to a transposition, as collected from the user."""

    source: str
    """Key of the instrument the material is written for."""
    target: str
    """Key of the instrument the material is transposed to."""
    key_name: Optional[str] = None
    """Optional key signature name (one of the fifteen major keys)."""
    note: Optional[str] = None
    """Optional note, one of the twelve canonical chromatic labels."""

    def validate(self) -> None:
        """Reject anything outside the accepted instrument, key and note sets.

        Raises:
            UnknownSpelling: If an instrument key or the note is not accepted.
            UnknownKey: If the key name is not one of the fifteen keys.
        """
        InstrumentKey.parse(self.source)
        InstrumentKey.parse(self.target)
        if self.key_name is not None:
            lookup_key(self.key_name)
        if self.note is not None and self.note not in CHROMATIC:
            raise UnknownSpelling(self.note)


@dataclass(frozen=True)
class TranspositionResult:
    """The outcome of a transposition, ready for display."""

    instrument_interval: int
    """Signed interval from the source instrument's key to the target's."""
    offset: int
    """Signed semitone shift applied to written material."""
    quality: IntervalQuality
    direction: Direction
    transposed_key: Optional[str] = None
    """Transposed key name, compound "A/B" when two keys share the pitch."""
    transposed_key_signature: Optional[str] = None
    """Signature of the transposed key, "A/B" form for compound keys."""
    transposed_note: Optional[str] = None
    """Canonical label of the transposed note."""

    @property
    def quality_name(self) -> str:
        return self.quality.display_name

    @property
    def direction_name(self) -> str:
        return self.direction.value

    @property
    def description(self) -> str:
        """E.g. "up a Major 2nd", or "unison"."""
        return describe(self.offset)

    @property
    def is_unison(self) -> bool:
        return self.direction == Direction.Unison


def transpose_key(key_name: str, offset: int) -> str:
    """Transpose a key signature name by a signed semitone offset.

    The key is resolved through the catalog, so names that are not chromatic
    spellings (such as "C♭") still transpose from their pitch class. The
    result is the single or compound catalog name at the shifted pitch.

    Raises:
        UnknownKey: If the key name is not one of the fifteen keys.
    """
    key = lookup_key(key_name)
    return key_name_for_pitch(transpose_pitch(key.pitch, offset))


def plan_transposition(
    source: str,
    target: str,
    key_name: Optional[str] = None,
    note: Optional[str] = None,
) -> TranspositionResult:
    """Plan the transposition of written material between two instruments.

    Args:
        source: Key of the source instrument, e.g. "C".
        target: Key of the target instrument, e.g. "B♭".
        key_name: Optional key signature name to re-spell.
        note: Optional canonical note label to re-spell.

    Returns:
        The offset, its interval quality and direction, and the transposed
        key and note when they were given. When the two instrument keys are
        the same, the result is a unison and nothing is re-spelled.

    Raises:
        UnknownSpelling: If an instrument key or the note is not accepted.
        UnknownKey: If the key name is not one of the fifteen keys.
    """
    request = TranspositionRequest(source, target, key_name, note)
    request.validate()
    return _plan(request)


def plan_request(request: TranspositionRequest) -> TranspositionResult:
    """Like :func:`plan_transposition`, taking a request object."""
    request.validate()
    return _plan(request)


def _plan(request: TranspositionRequest) -> TranspositionResult:
    instrument_interval = interval(request.source, request.target)
    offset = -instrument_interval
    quality = IntervalQuality.of(offset)
    direction = Direction.of(offset)
    logger.debug(
        "instruments %s -> %s: interval %d, offset %d",
        request.source,
        request.target,
        instrument_interval,
        offset,
    )
    if offset == 0:
        return TranspositionResult(instrument_interval, offset, quality, direction)

    transposed_key: Optional[str] = None
    transposed_key_signature: Optional[str] = None
    if request.key_name is not None:
        transposed_key = transpose_key(request.key_name, offset)
        transposed_key_signature = dual_signature_of(transposed_key)
        logger.debug("key %s -> %s", request.key_name, transposed_key)

    transposed_note: Optional[str] = None
    if request.note is not None:
        transposed_note = transpose(request.note, offset)
        logger.debug("note %s -> %s", request.note, transposed_note)

    return TranspositionResult(
        instrument_interval=instrument_interval,
        offset=offset,
        quality=quality,
        direction=direction,
        transposed_key=transposed_key,
        transposed_key_signature=transposed_key_signature,
        transposed_note=transposed_note,
    )

