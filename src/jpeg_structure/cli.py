import argparse
import logging
import sys
from pathlib import Path

from .cursor import Cursor, TruncationPolicy
from .errors import JpgError
from .loader import load_buffer
from .marker import marker_info
from .scanner import Scanner, list_markers, validate_soi
from .verify import compare, report

logger = logging.getLogger(__name__)

USAGE_REMINDER = "don't forget to include a path."
COMMANDS = ("dump", "markers", "verify")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jpeg-structure", description="JPEG structure dump")
    parser.add_argument("path", nargs="?", help="Path to the JPEG file to read")
    parser.add_argument(
        "command",
        nargs="?",
        default="dump",
        choices=COMMANDS,
        help="dump: print frame headers (default); "
             "markers: list the markers found in the file; "
             "verify: dump, then compare the first frame header with OpenCV",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on reads past the end of the file instead of reading zeros",
    )
    return parser


def print_markers(data) -> None:
    for offset, marker in list_markers(data):
        print(f"0x{offset:08X}  0x{marker.value:04X}  {marker.name:<5}  {marker_info(marker.value)}")


def verify(data, headers) -> bool:
    if not headers:
        print("No frame header found, nothing to compare")
        return False
    comparison = compare(headers[0], data)
    report(comparison)
    return comparison.matches


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.path is None:
        print(USAGE_REMINDER)
        return 0

    policy = TruncationPolicy.FAIL if args.strict else TruncationPolicy.RETURN_ZERO
    try:
        data = load_buffer(Path(args.path))
    except OSError as e:
        print(f"Cannot read {args.path}: {e}", file=sys.stderr)
        return 1

    try:
        if args.command == "markers":
            validate_soi(Cursor(data))
            print_markers(data)
            return 0
        headers = Scanner(data, policy).run()
    except JpgError as e:
        logger.debug("Scan of %s aborted", args.path, exc_info=True)
        print(f"{args.path}: {e}", file=sys.stderr)
        return 1

    if args.command == "verify":
        return 0 if verify(data, headers) else 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
