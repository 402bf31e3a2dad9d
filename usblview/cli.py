"""Command line entry point: decode a recording, show, plot and send it."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from usblview.decoder import read_fixes
from usblview.plot import plot_fixes
from usblview.sender import (
    DEFAULT_HOST,
    POSITION_PORT,
    TRAJECTORY_PORT,
    PositionSender,
    TrajectorySender,
)
from usblview.trajectory import trajectory_from_fixes

INITIAL_POSITION = (23915, 23990, 8765)

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="usblview",
        description="Decode a recorded USBL data file, show its fixes, plot and send them.",
    )
    parser.add_argument("file", type=Path, help="recorded data file (*.dat)")
    parser.add_argument("--plot", type=Path, metavar="IMAGE", help="save the plots to IMAGE")
    parser.add_argument(
        "--send",
        action="store_true",
        help="send the initial position and the trajectory over UDP",
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="receiver IPv4 address")
    parser.add_argument("--position-port", type=int, default=POSITION_PORT)
    parser.add_argument("--trajectory-port", type=int, default=TRAJECTORY_PORT)
    parser.add_argument(
        "--delay", type=float, default=0.01, help="pause between trajectory points in seconds"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug messages")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        fixes = read_fixes(args.file)
    except OSError as exc:
        print(f"error: failed to open {args.file}: {exc}", file=sys.stderr)
        return 1

    for fix in fixes:
        print(fix.display_text())
        print()
    log.debug("decoded %d fixes", len(fixes))

    if args.plot is not None:
        try:
            plot_fixes(fixes, args.plot)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    if args.send:
        try:
            with PositionSender(args.host, args.position_port) as position_sender:
                position_sender.send_position(*INITIAL_POSITION)
            with TrajectorySender(
                args.host, args.trajectory_port, delay=args.delay
            ) as trajectory_sender:
                trajectory_sender.send(trajectory_from_fixes(fixes))
        except (ValueError, OSError) as exc:
            print(f"error: failed to send data: {exc}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())