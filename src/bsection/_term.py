from __future__ import annotations

import os
import sys

_COLOR: bool | None = None


def supports_color() -> bool:
    if _COLOR is not None:
        return _COLOR
    if os.environ.get("NO_COLOR", "") != "" or os.environ.get("TERM", "") == "dumb":
        return False
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def force_color(enabled: bool | None) -> None:
    """Pin colouring on or off; ``None`` goes back to detecting the terminal."""
    global _COLOR
    _COLOR = enabled


def style(text: str, *codes: int) -> str:
    if not codes or not supports_color():
        return text
    return f"\033[{';'.join(str(c) for c in codes)}m{text}\033[0m"


def bold(text: str) -> str:
    return style(text, 1)


def dim(text: str) -> str:
    return style(text, 2)


def green(text: str) -> str:
    return style(text, 32)


def red(text: str) -> str:
    return style(text, 31)
