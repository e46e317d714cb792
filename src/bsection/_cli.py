from __future__ import annotations

import argparse
import json
import sys
from typing import Any, TextIO

from bsection._find import Element
from bsection._records import (
    ConstraintError,
    format_record,
    lower_target,
    parse_records,
    search_records,
    upper_target,
)
from bsection._term import bold, dim, force_color, green, red


def _print_side(label: str, element: Element | None) -> None:
    if element is None:
        print(f"{bold(label)}: {red('none!')}")
        return
    print(f"{bold(label)}: {dim(f'index {element.index}:')} {green(format_record(element.value))}")


def _side_json(element: Element | None) -> dict[str, Any] | None:
    if element is None:
        return None
    return {"index": element.index, "record": element.value}


def _read_lines(path: str | None, stdin: TextIO | None) -> list[str]:
    if path is None or path == "-":
        return (stdin if stdin is not None else sys.stdin).read().splitlines()
    with open(path, encoding="utf-8") as fh:
        return fh.read().splitlines()


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="bsection",
        description="Bisect records (one 'name=value ...' line each, sorted) for a range of field values.",
    )
    p.add_argument("--from", dest="lower", action="append", default=[], metavar="NAME(=|~)VALUE",
                   help="Lower constraint; repeat to require all of them. '~' snaps down to the nearest record")
    p.add_argument("--to", dest="upper", action="append", default=[], metavar="NAME(=|~)VALUE",
                   help="Upper constraint; repeat to require all of them. '~' snaps up to the nearest record")
    p.add_argument("--input", default=None, help="Read records from this file instead of stdin")
    p.add_argument("--json", action="store_true", help="Output the result as JSON")
    p.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    args = p.parse_args(argv)

    if args.no_color:
        force_color(False)

    try:
        lower = lower_target(args.lower)
        upper = upper_target(args.upper)
        records = parse_records(_read_lines(args.input, stdin))
        lo, hi = search_records(records, lower, upper)
    except ConstraintError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyError as e:
        print(f"error: record has no field {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: could not read input: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps({"lower": _side_json(lo), "upper": _side_json(hi)}, indent=2))
        return 0

    _print_side("LOWER", lo)
    _print_side("UPPER", hi)
    return 0
