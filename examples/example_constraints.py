"""Compound constraints — demonstrates nesting CombineLower and CombineUpper.

Each row is a (cpu_cores, memory_gb) machine size, sorted so that both
fields grow together. ``smallest_fitting`` finds the first size that
satisfies any one of several alternative requirement sets.
"""

from __future__ import annotations

from operator import itemgetter

from bsection import CombineLower, CombineUpper, Element, Target, find, sequence_lookup

SIZES: list[dict[str, float]] = [
    {"cores": 1, "mem": 2},
    {"cores": 2, "mem": 4},
    {"cores": 4, "mem": 8},
    {"cores": 8, "mem": 32},
    {"cores": 16, "mem": 64},
]


def at_least(**minimums: float) -> CombineUpper:
    """AND of ``field >= minimum`` for every keyword."""
    return CombineUpper([Target(v, key=itemgetter(name)) for name, v in minimums.items()])


def any_of(*groups: CombineUpper) -> CombineLower:
    """OR of requirement groups; keeps the first size past the boundary."""
    return CombineLower(groups, snap_upwards=True)


def smallest_fitting(*groups: CombineUpper) -> Element | None:
    r = find(sequence_lookup(SIZES), any_of(*groups), 0, len(SIZES) - 1)
    return r.element
