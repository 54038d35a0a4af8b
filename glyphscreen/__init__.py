"""Character-cell screen buffer with Unicode widths, colors and box-drawing merging."""

__version__ = "0.1.0"
__all__ = ["box", "color", "color_info", "screen", "string", "terminal"]