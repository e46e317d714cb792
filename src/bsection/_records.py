"""Records of named numeric fields and the constraints searched over them.

A record is one line of ``name=value`` pairs, e.g. ``t=12.5 size=300``.
Constraints use the same shape with either ``=`` (stay inside the range) or
``~`` (snap outward to the nearest record when there is no exact hit).
"""

from __future__ import annotations

import dataclasses
import math
import re
from collections.abc import Iterable, Sequence
from typing import Any

from bsection._combine import CombineLower, CombineUpper
from bsection._find import MATCH, Element, Ordering, above, below, find
from bsection._lookup import sequence_lookup
from bsection._range import find_range

Record = dict[str, float]

EQUALS = "="
TILDE = "~"

_PAIR_RE = re.compile(r"^(\w+)([=~])(.+)$")


class ConstraintError(ValueError):
    """Malformed constraint or record text."""


@dataclasses.dataclass(frozen=True)
class Pair:
    name: str
    op: str  # "=" | "~"
    value: str


def parse_pair(text: str) -> Pair:
    m = _PAIR_RE.match(text)
    if m is None:
        raise ConstraintError(f"invalid pair '{text}'")
    return Pair(m.group(1), m.group(2), m.group(3))


def _parse_number(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise ConstraintError(f"invalid number '{text}'") from None
    if not math.isfinite(value):
        raise ConstraintError(f"invalid number '{text}': must be finite")
    return value


def parse_record(line: str) -> Record:
    record: Record = {}
    for token in line.split():
        p = parse_pair(token)
        if p.op != EQUALS:
            raise ConstraintError(f"invalid op '{p.op}' in record field '{token}'")
        record[p.name] = _parse_number(p.value)
    return record


def parse_records(lines: Iterable[str]) -> list[Record]:
    """Parse one record per non-blank line; errors name the offending line."""
    records: list[Record] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            records.append(parse_record(line))
        except ConstraintError as e:
            raise ConstraintError(f"cannot parse record on line {lineno}: {e}") from None
    return records


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_record(record: Record) -> str:
    return " ".join(f"{name}={_format_number(value)}" for name, value in record.items())


class FieldTarget:
    """Compare one named field of a record against a fixed value."""

    __slots__ = ("name", "value", "snap_downwards", "snap_upwards")

    def __init__(self, name: str, value: float, *, snap_downwards: bool, snap_upwards: bool) -> None:
        self.name = name
        self.value = value
        self.snap_downwards = snap_downwards
        self.snap_upwards = snap_upwards

    @classmethod
    def from_pair(cls, pair: Pair, bound: str) -> FieldTarget:
        """``bound`` is ``"lower"`` (``--from``) or ``"upper"`` (``--to``).

        ``=`` snaps inward (towards the other bound) and ``~`` snaps outward.
        """
        if bound not in ("lower", "upper"):
            raise ValueError(f"Invalid bound: {bound!r}. Expected 'lower' or 'upper'.")
        outward = pair.op == TILDE
        # Outward is down for a lower bound and up for an upper bound.
        snap_down = outward if bound == "lower" else not outward
        return cls(pair.name, _parse_number(pair.value), snap_downwards=snap_down, snap_upwards=not snap_down)

    def cmp(self, record: Record) -> Ordering:
        v = record[self.name]
        if v < self.value:
            return below(self.snap_downwards)
        if self.value < v:
            return above(self.snap_upwards)
        return MATCH

    def __repr__(self) -> str:
        return (
            f"FieldTarget({self.name!r}, {self.value!r}, "
            f"snap_downwards={self.snap_downwards}, snap_upwards={self.snap_upwards})"
        )


def _resolve_snap(targets: Sequence[FieldTarget], flag: str) -> tuple[bool, bool]:
    downs = {t.snap_downwards for t in targets}
    ups = {t.snap_upwards for t in targets}
    if len(downs) != 1 or len(ups) != 1:
        raise ConstraintError(f"invalid combination of '{flag}' constraints: mixed usage of '=' and '~'")
    return downs.pop(), ups.pop()


def lower_target(constraints: Iterable[str]) -> CombineUpper | None:
    """AND of all ``--from`` constraints, or None when there are none."""
    targets = [FieldTarget.from_pair(parse_pair(c), "lower") for c in constraints]
    if not targets:
        return None
    snap_down, snap_up = _resolve_snap(targets, "--from")
    return CombineUpper(targets, snap_downwards=snap_down, snap_upwards=snap_up)


def upper_target(constraints: Iterable[str]) -> CombineLower | None:
    """AND of all ``--to`` constraints, or None when there are none."""
    targets = [FieldTarget.from_pair(parse_pair(c), "upper") for c in constraints]
    if not targets:
        return None
    snap_down, snap_up = _resolve_snap(targets, "--to")
    return CombineLower(targets, snap_downwards=snap_down, snap_upwards=snap_up)


def search_records(
    records: Sequence[Record],
    lower: Any | None,
    upper: Any | None,
) -> tuple[Element | None, Element | None]:
    lookup = sequence_lookup(records)
    last = len(records) - 1
    if lower is not None and upper is not None:
        return find_range(lookup, lower, upper, 0, last)
    if lower is not None:
        return find(lookup, lower, 0, last).element, None
    if upper is not None:
        return None, find(lookup, upper, 0, last).element
    return None, None
