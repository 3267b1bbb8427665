"""Major key signatures and circle-of-fifths data.

The catalog holds the fifteen conventional major keys: C, seven sharp keys
and seven flat keys. Three pitch classes have two keys each (B and C♭, F♯
and G♭, C♯ and D♭) with different accidental counts. Each of the fifteen
names is looked up on its own, and the duplicate pairs can also be looked up
together as a compound "A/B" name giving both signatures.

This catalog is kept apart from the chromatic table in
:mod:`transposition.pitch`. The two tables have different sizes and spell
some pitches differently: "C♭" is a key name here but not a chromatic
spelling. Each key records its pitch class so that it can be transposed and
found again from a pitch class.
"""

from dataclasses import dataclass
from typing import Dict, List

from transposition.base import UnknownKey
from transposition.pitch import FLAT, SEPARATOR, SHARP, PitchClass, is_spelling, resolve

MAX_ACCIDENTALS = 7
"""Largest number of sharps or flats in a key signature."""


def describe_accidentals(sharps: int, flats: int) -> str:
    """Describe a key signature in words.

    Args:
        sharps: Number of sharps (0-7).
        flats: Number of flats (0-7).

    Returns:
        "no accidentals", "N sharp(s)" or "N flat(s)".
    """
    if sharps > 0:
        return f"{sharps} sharp" if sharps == 1 else f"{sharps} sharps"
    elif flats > 0:
        return f"{flats} flat" if flats == 1 else f"{flats} flats"
    else:
        return "no accidentals"


@dataclass(frozen=True)
class MajorKey:
    """A major key and its signature.

    At most one of ``sharps`` and ``flats`` is non-zero.
    """

    name: str
    """Written name of the key, e.g. "B♭"."""
    sharps: int
    """Number of sharps in the signature."""
    flats: int
    """Number of flats in the signature."""
    relative_minor: str
    """Written name of the relative minor key."""
    pitch: PitchClass
    """Pitch class of the tonic."""

    @property
    def signature(self) -> str:
        """The signature in words, e.g. "2 flats"."""
        return describe_accidentals(self.sharps, self.flats)

    @property
    def symbol(self) -> str:
        """The signature in compact form, e.g. "2♭"."""
        if self.sharps > 0:
            return f"{self.sharps}{SHARP}"
        elif self.flats > 0:
            return f"{self.flats}{FLAT}"
        else:
            return f"No {SHARP} or {FLAT}"


C = MajorKey("C", 0, 0, "A", PitchClass.C)
G = MajorKey("G", 1, 0, "E", PitchClass.G)
D = MajorKey("D", 2, 0, "B", PitchClass.D)
A = MajorKey("A", 3, 0, "F" + SHARP, PitchClass.A)
E = MajorKey("E", 4, 0, "C" + SHARP, PitchClass.E)
B = MajorKey("B", 5, 0, "G" + SHARP, PitchClass.B)
F_SHARP = MajorKey("F" + SHARP, 6, 0, "D" + SHARP, PitchClass.Fs)
C_SHARP = MajorKey("C" + SHARP, 7, 0, "A" + SHARP, PitchClass.Cs)
F = MajorKey("F", 0, 1, "D", PitchClass.F)
B_FLAT = MajorKey("B" + FLAT, 0, 2, "G", PitchClass.As)
E_FLAT = MajorKey("E" + FLAT, 0, 3, "C", PitchClass.Ds)
A_FLAT = MajorKey("A" + FLAT, 0, 4, "F", PitchClass.Gs)
D_FLAT = MajorKey("D" + FLAT, 0, 5, "B" + FLAT, PitchClass.Cs)
G_FLAT = MajorKey("G" + FLAT, 0, 6, "E" + FLAT, PitchClass.Fs)
# C♭ is not a chromatic spelling; it belongs to B.
C_FLAT = MajorKey("C" + FLAT, 0, 7, "A" + FLAT, PitchClass.B)

MAJOR_KEYS: List[MajorKey] = [
    C,
    G,
    D,
    A,
    E,
    B,
    F_SHARP,
    C_SHARP,
    F,
    B_FLAT,
    E_FLAT,
    A_FLAT,
    D_FLAT,
    G_FLAT,
    C_FLAT,
]
"""All fifteen major keys: C, the sharp keys, then the flat keys."""


def _build_key_lookup() -> Dict[str, MajorKey]:
    d: Dict[str, MajorKey] = {}
    for key in MAJOR_KEYS:
        assert key.name not in d
        assert 0 <= key.sharps <= MAX_ACCIDENTALS
        assert 0 <= key.flats <= MAX_ACCIDENTALS
        assert key.sharps == 0 or key.flats == 0
        if is_spelling(key.name):
            assert resolve(key.name) == key.pitch
        d[key.name] = key
    return d


KEY_LOOKUP = _build_key_lookup()
"""Lookup table from key name to MajorKey."""

KEY_NAMES: List[str] = [key.name for key in MAJOR_KEYS]
"""The fifteen accepted key signature names."""


def _build_pitch_keys() -> Dict[PitchClass, List[MajorKey]]:
    """Group keys by tonic pitch class, sharp-side key first."""
    d: Dict[PitchClass, List[MajorKey]] = {p: [] for p in PitchClass}
    for key in MAJOR_KEYS:
        d[key.pitch].append(key)
    for keys in d.values():
        assert 1 <= len(keys) <= 2
        keys.sort(key=lambda k: k.flats)
    return d


_PITCH_KEYS = _build_pitch_keys()

COMPOUND_KEY_NAMES: List[str] = [
    SEPARATOR.join(k.name for k in keys)
    for keys in _PITCH_KEYS.values()
    if len(keys) > 1
]
"""Compound names of the enharmonic key pairs: "C♯/D♭", "F♯/G♭", "B/C♭"."""


def lookup_key(name: str) -> MajorKey:
    """Look up a major key by its exact name.

    Raises:
        UnknownKey: If the name is not one of the fifteen keys.
    """
    key = KEY_LOOKUP.get(name)
    if key is None:
        raise UnknownKey(name)
    return key


def signature_of(name: str) -> str:
    """Describe the key signature of a single key name, e.g. "1 sharp".

    Raises:
        UnknownKey: If the name is not one of the fifteen keys.
    """
    return lookup_key(name).signature


def dual_signature_of(name: str) -> str:
    """Describe the signatures of a possibly compound key name.

    Each "/"-separated part is looked up on its own and the descriptions are
    joined with "/", so "F♯/G♭" gives "6 sharps/6 flats". A single name gives
    the same result as :func:`signature_of`.

    Raises:
        UnknownKey: If any part is not one of the fifteen keys.
    """
    return SEPARATOR.join(signature_of(part) for part in name.split(SEPARATOR))


def is_key_name(name: str) -> bool:
    """Check whether a name is a single or compound catalog name."""
    if name in KEY_LOOKUP:
        return True
    return name in COMPOUND_KEY_NAMES


def keys_for_pitch(pitch: PitchClass) -> List[MajorKey]:
    """Find the keys whose tonic is the given pitch class.

    Returns:
        One key, or two for the enharmonic pairs (sharp-side key first).
    """
    return list(_PITCH_KEYS[pitch])


def key_name_for_pitch(pitch: PitchClass) -> str:
    """The single or compound key name for a pitch class."""
    return SEPARATOR.join(k.name for k in _PITCH_KEYS[pitch])


_CIRCLE_OF_FIFTHS = [G, D, A, E, B, F_SHARP, D_FLAT, A_FLAT, E_FLAT, B_FLAT, F, C]


def circle_of_fifths() -> List[str]:
    """Major key names clockwise round the circle, starting at G and ending at C."""
    return [k.name for k in _CIRCLE_OF_FIFTHS]


def circle_of_fifths_with_enharmonics() -> List[str]:
    """Like :func:`circle_of_fifths`, with the enharmonic twin where one exists.

    The labels are "B/C♭", "F♯/G♭" and "D♭/C♯", which the circle shows with
    the more common spelling first.
    """
    twins = {B: C_FLAT, F_SHARP: G_FLAT, D_FLAT: C_SHARP}
    names = []
    for key in _CIRCLE_OF_FIFTHS:
        twin = twins.get(key)
        names.append(key.name if twin is None else key.name + SEPARATOR + twin.name)
    return names


def relative_minors() -> List[str]:
    """Relative minor names aligned with :func:`circle_of_fifths`."""
    return [k.relative_minor for k in _CIRCLE_OF_FIFTHS]
