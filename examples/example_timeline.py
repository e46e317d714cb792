"""Time-window queries over a sorted log — demonstrates find_range with snapping.

The log is never loaded into a list: ``lookup`` reads a single entry on
demand, the way a paged file or remote store would be read.
"""

from __future__ import annotations

from bsection import Element, find_range, with_snap

# (timestamp in seconds, message), sorted by timestamp
LOG: list[tuple[int, str]] = [
    (100, "boot"),
    (160, "mount /data"),
    (230, "net up"),
    (300, "sync start"),
    (420, "sync done"),
    (600, "shutdown"),
]


def lookup(index: int) -> tuple[int, str]:
    if not 0 <= index < len(LOG):
        raise IndexError(f"no log entry {index}")
    return LOG[index]


def _ts(entry: tuple[int, str]) -> int:
    return entry[0]


def window(start: int, end: int) -> tuple[Element | None, Element | None]:
    """First and last entry with ``start <= ts <= end``."""
    return find_range(
        lookup,
        with_snap(start, "up", key=_ts),
        with_snap(end, "down", key=_ts),
        0,
        len(LOG) - 1,
    )


def covering_window(start: int, end: int) -> tuple[Element | None, Element | None]:
    """Smallest run of entries whose span covers ``[start, end]``.

    Bounds that fall between entries snap outward to the neighbouring entry.
    """
    return find_range(
        lookup,
        with_snap(start, "down", key=_ts),
        with_snap(end, "up", key=_ts),
        0,
        len(LOG) - 1,
    )


def messages(start: int, end: int) -> list[str]:
    first, last = window(start, end)
    if first is None or last is None or first.index > last.index:
        return []
    return [lookup(i)[1] for i in range(first.index, last.index + 1)]
