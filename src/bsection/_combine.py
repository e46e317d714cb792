"""AND/OR composition of predicates.

``CombineLower`` is below a value only if every child is, and above it as
soon as any child is. ``CombineUpper`` is the dual. Over lower-bound style
targets (``field >= x``) this makes ``CombineLower`` an OR and
``CombineUpper`` an AND; nesting the two gives arbitrary AND/OR trees.

The children's valid flags are dropped: whether a snapped child makes the
composite a valid result is not well defined, so each combinator carries its
own ``snap_downwards``/``snap_upwards`` instead.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bsection._find import MATCH, Ordering, Predicate, above, as_predicate, below


class _Combine:
    __slots__ = ("children", "snap_downwards", "snap_upwards")

    def __init__(
        self,
        children: Iterable[Any],
        snap_downwards: bool = False,
        snap_upwards: bool = False,
    ) -> None:
        self.children: tuple[Predicate, ...] = tuple(as_predicate(c) for c in children)
        self.snap_downwards = snap_downwards
        self.snap_upwards = snap_upwards

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({list(self.children)!r}, "
            f"snap_downwards={self.snap_downwards}, snap_upwards={self.snap_upwards})"
        )


class CombineLower(_Combine):
    """Below iff below all children, above iff above any child."""

    __slots__ = ()

    def cmp(self, value: Any) -> Ordering:
        if not self.children:
            return MATCH
        all_below = True
        for child in self.children:
            order = child.cmp(value)
            if order.is_above:
                return above(self.snap_upwards)
            if not order.is_below:
                all_below = False
        if all_below:
            return below(self.snap_downwards)
        return MATCH


class CombineUpper(_Combine):
    """Above iff above all children, below iff below any child."""

    __slots__ = ()

    def cmp(self, value: Any) -> Ordering:
        if not self.children:
            return MATCH
        all_above = True
        for child in self.children:
            order = child.cmp(value)
            if order.is_below:
                return below(self.snap_downwards)
            if not order.is_above:
                all_above = False
        if all_above:
            return above(self.snap_upwards)
        return MATCH
