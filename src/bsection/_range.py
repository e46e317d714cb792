from __future__ import annotations

from typing import Any

from bsection._find import MATCH, Element, Lookup, Ordering, Predicate, above, as_predicate, below, find


class _RangePredicate:
    """Matches anything between ``lower`` and ``upper``; never a valid snap."""

    __slots__ = ("lower", "upper")

    def __init__(self, lower: Predicate, upper: Predicate) -> None:
        self.lower = lower
        self.upper = upper

    def cmp(self, value: Any) -> Ordering:
        if self.upper.cmp(value).is_above:
            return above(False)
        if self.lower.cmp(value).is_below:
            return below(False)
        return MATCH


def find_range(
    lookup: Lookup,
    lower: Any,
    upper: Any,
    low: int,
    high: int,
) -> tuple[Element | None, Element | None]:
    """Find the tightest elements for a lower and an upper target at once.

    One bisection locates any index inside the range (or the gap where the
    range would be). Each boundary is then resolved by its own bisection over
    the half of that window on its side, widened by one index outward so a
    snapping neighbour just outside the window is still seen.

    Results are undefined if ``lower`` lies above ``upper``.
    """
    lower = as_predicate(lower)
    upper = as_predicate(upper)

    r = find(lookup, _RangePredicate(lower, upper), low, high)
    if r.element is None:
        # r.high < r.low: the range would sit between them.
        lower_end, upper_start = r.high, r.low
    else:
        lower_end = upper_start = r.element.index

    lower_r = find(lookup, lower, max(r.low - 1, low), lower_end)
    upper_r = find(lookup, upper, upper_start, min(r.high + 1, high))
    return lower_r.element, upper_r.element
