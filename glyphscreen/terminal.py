"""Terminal size detection and colour capability discovery."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache

_STDOUT_FILENO = 1


@dataclass(frozen=True)
class Dimensions:
    """A size in terminal cells."""

    dimx: int
    dimy: int


class ColorSupport(IntEnum):
    """How many colours the terminal can show, ordered by capability."""

    PALETTE1 = 0
    PALETTE16 = 1
    PALETTE256 = 2
    TRUE_COLOR = 3


_fallback_size = Dimensions(80, 80) if sys.platform == "win32" else Dimensions(80, 25)


def terminal_size() -> Dimensions:
    """Return the size of the terminal attached to stdout.

    Falls back to the configured size when it cannot be detected.
    """
    try:
        size = os.get_terminal_size(_STDOUT_FILENO)
    except (OSError, ValueError):
        return _fallback_size
    if size.columns == 0 or size.lines == 0:
        return _fallback_size
    return Dimensions(size.columns, size.lines)


def set_fallback_size(dimensions: Dimensions) -> None:
    """Set the size used when the terminal size cannot be detected."""
    global _fallback_size
    _fallback_size = dimensions


def compute_color_support(environ: Mapping[str, str] | None = None) -> ColorSupport:
    """Guess the colour support from COLORTERM and TERM."""
    if environ is None:
        environ = os.environ
    colorterm = environ.get("COLORTERM", "")
    if "24bit" in colorterm or "truecolor" in colorterm:
        return ColorSupport.TRUE_COLOR
    term = environ.get("TERM", "")
    if "256" in colorterm or "256" in term:
        return ColorSupport.PALETTE256
    return ColorSupport.PALETTE16


@lru_cache(maxsize=None)
def color_support() -> ColorSupport:
    """Return the colour support of this process's terminal, computed once."""
    return compute_color_support()


def reset_color_support_cache() -> None:
    """Forget the cached colour support so that it is computed again."""
    color_support.cache_clear()