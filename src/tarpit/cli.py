from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .api import RunOptions, run_string
from .errors import TarpitError

logger = logging.getLogger(__name__)

DUMP_CELLS = 64


def _format_cells(cells: List[int], pointer: int) -> str:
    rows = []
    for i in range(0, len(cells), 8):
        row = " ".join(f"[{v:3d}]" if i + j == pointer else f" {v:3d} "
                       for j, v in enumerate(cells[i:i + 8]))
        rows.append(f"{i:4d} | {row}")
    return "\n".join(rows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tarpit",
        description="Run a program written in the eight-instruction tape language.",
    )
    parser.add_argument("file", nargs="?", help="program file to run")
    parser.add_argument("-e", "--execute", metavar="CODE", help="run CODE instead of a file")
    parser.add_argument("--check", action="store_true",
                        help="reject programs with unbalanced brackets before running")
    parser.add_argument("--max-steps", type=int, default=None,
                        help="abort after this many instructions")
    parser.add_argument("--dump-tape", action="store_true",
                        help="print the first tape cells to stderr after the run")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.file is None) == (args.execute is None):
        parser.error("give exactly one of FILE or -e CODE")
    if args.max_steps is not None and args.max_steps < 0:
        parser.error("--max-steps must not be negative")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    options = RunOptions(check_brackets=args.check, max_steps=args.max_steps)

    if args.execute is not None:
        code = args.execute
    else:
        try:
            with open(args.file, "r", encoding=options.encoding) as f:
                code = f.read()
        except OSError as e:
            print(f"Couldn't read {args.file}: {e.strerror}", file=sys.stderr)
            return 1
        except UnicodeDecodeError as e:
            print(f"Couldn't read {args.file}: not valid {options.encoding} ({e.reason} at byte {e.start})",
                  file=sys.stderr)
            return 1

    try:
        result = run_string(code, options=options)
    except TarpitError as e:
        logger.debug("run aborted", exc_info=True)
        print(str(e), file=sys.stderr)
        return 1

    if args.dump_tape:
        cells = result.cells[:DUMP_CELLS]
        print(f"steps: {result.steps}  pointer: {result.pointer}", file=sys.stderr)
        if cells:
            print(_format_cells(cells, result.pointer), file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
