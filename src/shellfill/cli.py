from __future__ import annotations

import argparse
import logging
import sys

from shellfill.chem.anomalies import build_anomaly_note
from shellfill.chem.aufbau import MAX_ELECTRONS, fill
from shellfill.chem.elements import get_symbol
from shellfill.chem.notation import abbreviated_config, config_string


logger = logging.getLogger(__name__)

DEFAULT_RANGES = ("54-70",)


def parse_range(text: str) -> range:
    start_str, sep, end_str = text.partition("-")
    try:
        start = int(start_str)
        end = int(end_str) if sep else start
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid electron range '{text}'.") from None
    if start < 0 or end < start or end > MAX_ELECTRONS:
        raise argparse.ArgumentTypeError(
            f"Electron range '{text}' must satisfy 0 <= start <= end <= {MAX_ELECTRONS}."
        )
    return range(start, end + 1)


def format_line(electrons: int, abbrev: bool = False, apply_exceptions: bool = True) -> str:
    shell = fill(electrons, apply_exceptions=apply_exceptions)
    text = abbreviated_config(shell) if abbrev else config_string(shell)
    symbol = get_symbol(electrons)
    prefix = f"{electrons} ({symbol})" if symbol else str(electrons)
    return f"{prefix} => {text}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print ground-state electron configurations.")
    parser.add_argument(
        "--range",
        dest="ranges",
        type=parse_range,
        action="append",
        metavar="START-END",
        help=f"electron counts to print (default {', '.join(DEFAULT_RANGES)})",
    )
    parser.add_argument("--abbrev", action="store_true", help="use noble-gas core notation")
    parser.add_argument("--no-exceptions", action="store_true", help="skip the d-block anomaly table")
    parser.add_argument("--notes", action="store_true", help="explain corrected configurations")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ranges = args.ranges or [parse_range(text) for text in DEFAULT_RANGES]
    for interval in ranges:
        logger.debug(f"Printing {interval.start}..{interval.stop - 1}")
        for electrons in interval:
            print(format_line(electrons, abbrev=args.abbrev, apply_exceptions=not args.no_exceptions))
            if args.notes and not args.no_exceptions:
                note = build_anomaly_note(electrons)
                if note is not None:
                    print(f"    expected {note.expected_config}")
                    print(f"    {note.explanation}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
