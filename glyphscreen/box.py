"""Axis-aligned rectangles of terminal cells."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Box:
    """A rectangle of cells; both bounds are inclusive."""

    x_min: int = 0
    x_max: int = 0
    y_min: int = 0
    y_max: int = 0

    @staticmethod
    def intersection(a: Box, b: Box) -> Box:
        """Return the biggest box contained in both ``a`` and ``b``."""
        return Box(
            x_min=max(a.x_min, b.x_min),
            x_max=min(a.x_max, b.x_max),
            y_min=max(a.y_min, b.y_min),
            y_max=min(a.y_max, b.y_max),
        )

    def contain(self, x: int, y: int) -> bool:
        """Return whether the cell (x, y) lies inside the box."""
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max