"""Shared fixtures for bsection tests."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from typing import Any

import pytest

from bsection._term import force_color


class CountingLookup:
    """Lookup over a sequence that records every probed index."""

    def __init__(self, seq: Sequence[Any]) -> None:
        self.seq = seq
        self.probes: list[int] = []

    def __call__(self, index: int) -> Any:
        self.probes.append(index)
        if index < 0:
            raise IndexError(f"negative index {index}")
        if index >= len(self.seq):
            raise IndexError(f"index {index} out of bounds")
        return self.seq[index]


@pytest.fixture
def counting_lookup() -> Callable[[Sequence[Any]], CountingLookup]:
    return CountingLookup


@pytest.fixture(autouse=True)
def _reset_color():
    yield
    force_color(None)


@pytest.fixture(autouse=True)
def _add_examples_to_path():
    """Ensure examples/ is importable."""
    examples_dir = os.path.join(os.path.dirname(__file__), "..", "examples")
    examples_dir = os.path.abspath(examples_dir)
    if examples_dir not in sys.path:
        sys.path.insert(0, examples_dir)
    yield
    if examples_dir in sys.path:
        sys.path.remove(examples_dir)
