"""Single-target bisection with snap-aware retention of near misses.

A predicate reports, for one candidate value, whether the value sits below,
above, or exactly at an implicit target. Non-matching outcomes carry a
``valid`` flag: when set, the engine keeps the value as the best answer so far
("snapping") while it keeps narrowing the range.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

Lookup = Callable[[int], Any]

BELOW = "below"
ABOVE = "above"
MATCHES = "match"


@dataclasses.dataclass(frozen=True)
class Ordering:
    """Where a candidate value sits relative to a target."""

    relation: str  # "below" | "above" | "match"
    valid: bool = False

    @property
    def is_below(self) -> bool:
        return self.relation == BELOW

    @property
    def is_above(self) -> bool:
        return self.relation == ABOVE

    @property
    def is_match(self) -> bool:
        return self.relation == MATCHES


MATCH = Ordering(MATCHES)


def below(valid: bool = False) -> Ordering:
    return Ordering(BELOW, valid)


def above(valid: bool = False) -> Ordering:
    return Ordering(ABOVE, valid)


@runtime_checkable
class Predicate(Protocol):
    """Anything that can place a candidate value relative to its target."""

    def cmp(self, value: Any) -> Ordering: ...


class Target:
    """Leaf predicate comparing a (keyed) candidate against a fixed value.

    ``snap_downwards`` keeps values below the target as tentative results,
    ``snap_upwards`` keeps values above it. Both default to off, which makes
    the target match exact values only.
    """

    __slots__ = ("value", "key", "snap_downwards", "snap_upwards")

    def __init__(
        self,
        value: Any,
        *,
        key: Callable[[Any], Any] | None = None,
        snap_downwards: bool = False,
        snap_upwards: bool = False,
    ) -> None:
        self.value = value
        self.key = key
        self.snap_downwards = snap_downwards
        self.snap_upwards = snap_upwards

    def cmp(self, value: Any) -> Ordering:
        v = value if self.key is None else self.key(value)
        if v < self.value:
            return below(self.snap_downwards)
        if self.value < v:
            return above(self.snap_upwards)
        return MATCH

    def __repr__(self) -> str:
        snap = _snap_name(self.snap_downwards, self.snap_upwards)
        return f"Target({self.value!r}, snap={snap!r})"


def _snap_name(snap_downwards: bool, snap_upwards: bool) -> str | None:
    if snap_downwards and snap_upwards:
        return "both"
    if snap_downwards:
        return "down"
    if snap_upwards:
        return "up"
    return None


def with_snap(value: Any, snap: str | None = None, *, key: Callable[[Any], Any] | None = None) -> Target:
    """Build a ``Target`` from a snap direction name.

    ``snap`` is one of ``None``, ``"down"``, ``"up"`` or ``"both"``.
    """
    if snap not in (None, "down", "up", "both"):
        raise ValueError(f"Invalid snap direction: {snap!r}. Expected None, 'down', 'up' or 'both'.")
    return Target(
        value,
        key=key,
        snap_downwards=snap in ("down", "both"),
        snap_upwards=snap in ("up", "both"),
    )


def as_predicate(target: Any) -> Predicate:
    """Plain values act as non-snapping targets compared by natural ordering."""
    if isinstance(target, Predicate):
        return target
    return Target(target)


@dataclasses.dataclass(frozen=True)
class Element:
    value: Any
    index: int


@dataclasses.dataclass(frozen=True)
class FindResult:
    """Outcome of one bisection pass.

    ``low`` and ``high`` are the final search bounds. When the loop ran out
    without a match they are crossed (``low == high + 1``): every probed
    index before ``low`` was below the target and every probed index after
    ``high`` was above it, so they bracket the gap where a match would have
    been.
    """

    element: Element | None
    low: int
    high: int

    @property
    def found(self) -> bool:
        return self.element is not None


def find(lookup: Lookup, target: Any, low: int, high: int) -> FindResult:
    """Bisect the inclusive index range ``[low, high]`` for ``target``.

    Exceptions raised by ``lookup`` abort the search and propagate as-is.
    """
    pred = as_predicate(target)
    element: Element | None = None
    while low <= high:
        mid = low + (high - low) // 2
        value = lookup(mid)
        order = pred.cmp(value)
        if order.is_below:
            if order.valid:
                element = Element(value, mid)
            low = mid + 1
        elif order.is_above:
            if order.valid:
                element = Element(value, mid)
            high = mid - 1
        else:
            element = Element(value, mid)
            break
    return FindResult(element, low, high)
