from bsection._cli import main
from bsection._combine import CombineLower, CombineUpper
from bsection._find import (
    MATCH,
    Element,
    FindResult,
    Ordering,
    Predicate,
    Target,
    above,
    below,
    find,
    with_snap,
)
from bsection._lookup import sequence_lookup
from bsection._range import find_range

__all__ = [
    "MATCH",
    "CombineLower",
    "CombineUpper",
    "Element",
    "FindResult",
    "Ordering",
    "Predicate",
    "Target",
    "above",
    "below",
    "find",
    "find_range",
    "main",
    "sequence_lookup",
    "with_snap",
]
