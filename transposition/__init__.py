from transposition.base import MatchException, UnknownKey, UnknownSpelling
from transposition.instrument import INSTRUMENT_KEYS, InstrumentKey
from transposition.interval import Direction, IntervalQuality, describe, interval
from transposition.keys import (
    COMPOUND_KEY_NAMES,
    KEY_NAMES,
    MajorKey,
    dual_signature_of,
    keys_for_pitch,
    lookup_key,
    signature_of,
)
from transposition.pitch import CHROMATIC, PitchClass, canonical, matches, resolve
from transposition.plan import (
    TranspositionRequest,
    TranspositionResult,
    plan_transposition,
)
from transposition.transpose import transpose

__all__ = [
    "CHROMATIC",
    "COMPOUND_KEY_NAMES",
    "Direction",
    "INSTRUMENT_KEYS",
    "InstrumentKey",
    "IntervalQuality",
    "KEY_NAMES",
    "MajorKey",
    "MatchException",
    "PitchClass",
    "TranspositionRequest",
    "TranspositionResult",
    "UnknownKey",
    "UnknownSpelling",
    "canonical",
    "describe",
    "dual_signature_of",
    "interval",
    "keys_for_pitch",
    "lookup_key",
    "matches",
    "plan_transposition",
    "resolve",
    "signature_of",
    "transpose",
]
