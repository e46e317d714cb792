from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from bsection._find import Lookup


def sequence_lookup(seq: Sequence[Any] | Any) -> Lookup:
    """Lookup over anything indexable with ``len()`` (lists, tuples, numpy arrays).

    Negative indices are rejected instead of wrapping around from the end.
    """

    def lookup(index: int) -> Any:
        if index < 0:
            raise IndexError(f"negative index {index}")
        if index >= len(seq):
            raise IndexError(f"index {index} out of bounds")
        return seq[index]

    return lookup
