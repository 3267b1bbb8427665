"""Command line entry point for the transposition tools.

Subcommands:

- ``plan``: transpose a key signature and/or a note between two instruments.
- ``signature``: show the key signature of a key or compound key name.
- ``fifths``: list the circle of fifths with signatures and relative minors.
- ``scales``: list practice scales, or pick one at random.

Spellings may be typed with ASCII accidentals ("Bb", "F#"); they are
converted to the ♭ and ♯ glyphs before reaching the engine.
"""

import logging
import random
import sys
from argparse import ArgumentParser, Namespace
from typing import List, Optional

from transposition import constants
from transposition.base import MatchException
from transposition.instrument import INSTRUMENT_KEYS, InstrumentKey
from transposition.keys import (
    circle_of_fifths_with_enharmonics,
    dual_signature_of,
    relative_minors,
)
from transposition.pitch import FLAT, SEPARATOR, SHARP
from transposition.plan import TranspositionRequest, TranspositionResult, plan_request
from transposition.scales import ScaleFamily, pick_scale, scales_for

_LETTERS = "ABCDEFG"
_ASCII_ACCIDENTALS = {"#": SHARP, "b": FLAT}


def normalize_spelling(spelling: str) -> str:
    """Replace ASCII accidentals with the engine's glyphs.

    Each "/"-separated part that is a note letter followed by "#" or "b"
    has the accidental replaced. Anything else is left untouched.

    Args:
        spelling: A spelling as typed, e.g. "Bb" or "C#/Db".

    Returns:
        The spelling with glyph accidentals, e.g. "B♭" or "C♯/D♭".
    """
    parts = []
    for part in spelling.split(SEPARATOR):
        if len(part) == 2 and part[0] in _LETTERS and part[1] in _ASCII_ACCIDENTALS:
            part = part[0] + _ASCII_ACCIDENTALS[part[1]]
        parts.append(part)
    return SEPARATOR.join(parts)


def format_result(result: TranspositionResult) -> List[str]:
    """Render a transposition result as display lines."""
    if result.is_unison:
        return ["No transposition needed, keys are in unison"]
    lines = [f"Transposing {result.description}"]
    if result.transposed_key is not None:
        lines.append(
            f"Transposed key signature: {result.transposed_key}"
            f" ({result.transposed_key_signature})"
        )
    if result.transposed_note is not None:
        lines.append(f"Transposed note: {result.transposed_note}")
    return lines


def run_plan(args: Namespace) -> None:
    request = TranspositionRequest(
        source=normalize_spelling(args.source),
        target=normalize_spelling(args.target),
        key_name=None if args.key is None else normalize_spelling(args.key),
        note=None if args.note is None else normalize_spelling(args.note),
    )
    logging.info("planning %s", request)
    for line in format_result(plan_request(request)):
        print(line)


def run_signature(args: Namespace) -> None:
    name = normalize_spelling(args.name)
    print(f"{name}: {dual_signature_of(name)}")


def run_fifths(args: Namespace) -> None:
    for major, minor in zip(circle_of_fifths_with_enharmonics(), relative_minors()):
        print(f"{major} ({dual_signature_of(major)}), relative minor {minor}")


def run_scales(args: Namespace) -> None:
    if args.family:
        families = [ScaleFamily(f) for f in args.family]
    else:
        families = list(ScaleFamily)
    if args.pick:
        scale = pick_scale(families, random.Random(args.seed))
        scales = [scale]
    else:
        scales = scales_for(families)
    for scale in scales:
        if scale.key_signature is None:
            print(f"{scale.name} ({scale.range})")
        else:
            print(f"{scale.name} ({scale.range}, {scale.key_signature})")


def run_instruments(args: Namespace) -> None:
    for key in InstrumentKey:
        print(f"{key.spelling}: {', '.join(key.examples)}")


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        An ArgumentParser with one subparser per tool.
    """
    parser = ArgumentParser(prog="transposition")
    parser.add_argument("--log-level", default=constants.DEFAULT_LOG_LEVEL)
    sub = parser.add_subparsers(dest="command", required=True)

    plan = sub.add_parser("plan", help="transpose between two instruments")
    plan.add_argument("--source", default=constants.DEFAULT_INSTRUMENT)
    plan.add_argument("--target", default=constants.DEFAULT_INSTRUMENT)
    plan.add_argument("--key", help="key signature name, e.g. G or Bb")
    plan.add_argument("--note", help="note, e.g. D or C#/Db")
    plan.set_defaults(func=run_plan)

    signature = sub.add_parser("signature", help="show a key signature")
    signature.add_argument("name", help="key name, e.g. G or F#/Gb")
    signature.set_defaults(func=run_signature)

    fifths = sub.add_parser("fifths", help="list the circle of fifths")
    fifths.set_defaults(func=run_fifths)

    scales = sub.add_parser("scales", help="list or pick practice scales")
    scales.add_argument(
        "--family",
        action="append",
        choices=[f.value for f in ScaleFamily],
        help="scale family to include (repeatable, default all)",
    )
    scales.add_argument("--pick", action="store_true", help="pick one at random")
    scales.add_argument("--seed", type=int, default=None)
    scales.set_defaults(func=run_scales)

    instruments = sub.add_parser(
        "instruments", help=f"list instrument keys ({' '.join(INSTRUMENT_KEYS)})"
    )
    instruments.set_defaults(func=run_instruments)
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(format=constants.LOG_FORMAT, level=log_level)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the transposition command line.

    Args:
        argv: Arguments to parse; ``sys.argv[1:]`` if omitted.

    Returns:
        Process exit status.
    """
    parser = make_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        args.func(args)
    except MatchException as e:
        logging.error("%s", e)
        return constants.EXIT_UNKNOWN_INPUT
    return 0


if __name__ == "__main__":
    sys.exit(main())
