"""A grid of styled terminal cells and its rendering to escape sequences."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import NamedTuple, TextIO

from glyphscreen.box import Box
from glyphscreen.color import Color
from glyphscreen.string import string_width
from glyphscreen.terminal import Dimensions, terminal_size

_BOLD_SET = "\x1b[1m"
_BOLD_RESET = "\x1b[22m"
_DIM_SET = "\x1b[2m"
_DIM_RESET = "\x1b[22m"
_UNDERLINED_SET = "\x1b[4m"
_UNDERLINED_RESET = "\x1b[24m"
_BLINK_SET = "\x1b[5m"
_BLINK_RESET = "\x1b[25m"
_INVERTED_SET = "\x1b[7m"
_INVERTED_RESET = "\x1b[27m"

_MOVE_LEFT = "\r"
_MOVE_UP = "\x1b[1A"
_CLEAR_LINE = "\x1b[2K"


@dataclass
class Pixel:
    """One terminal cell: its glyph and its style."""

    character: str = " "
    blink: bool = False
    bold: bool = False
    dim: bool = False
    inverted: bool = False
    underlined: bool = False
    background_color: Color = field(default_factory=Color)
    foreground_color: Color = field(default_factory=Color)


def fixed(value: int) -> Dimensions:
    """Return square dimensions of the given size."""
    return Dimensions(value, value)


def full() -> Dimensions:
    """Return the dimensions of the terminal."""
    return terminal_size()


def _update_style(parts: list[str], previous: Pixel, following: Pixel) -> Pixel:
    toggles = (
        ("bold", _BOLD_SET, _BOLD_RESET),
        ("dim", _DIM_SET, _DIM_RESET),
        ("underlined", _UNDERLINED_SET, _UNDERLINED_RESET),
        ("blink", _BLINK_SET, _BLINK_RESET),
        ("inverted", _INVERTED_SET, _INVERTED_RESET),
    )
    for name, set_code, reset_code in toggles:
        wanted = getattr(following, name)
        if wanted != getattr(previous, name):
            parts.append(set_code if wanted else reset_code)

    if (
        following.foreground_color != previous.foreground_color
        or following.background_color != previous.background_color
    ):
        parts.append(f"\x1b[{following.foreground_color.print(False)}m")
        parts.append(f"\x1b[{following.background_color.print(True)}m")
    return following


class _Tile(NamedTuple):
    left: int
    top: int
    right: int
    down: int
    round: int


_TILE_ENCODING: dict[str, _Tile] = {
    glyph: _Tile(*code)
    for glyph, code in {
        "─": (1, 0, 1, 0, 0), "━": (2, 0, 2, 0, 0),
        "│": (0, 1, 0, 1, 0), "┃": (0, 2, 0, 2, 0),
        "┌": (0, 0, 1, 1, 0), "┍": (0, 0, 2, 1, 0),
        "┎": (0, 0, 1, 2, 0), "┏": (0, 0, 2, 2, 0),
        "┐": (1, 0, 0, 1, 0), "┑": (2, 0, 0, 1, 0),
        "┒": (1, 0, 0, 2, 0), "┓": (2, 0, 0, 2, 0),
        "└": (0, 1, 1, 0, 0), "┕": (0, 1, 2, 0, 0),
        "┖": (0, 2, 1, 0, 0), "┗": (0, 2, 2, 0, 0),
        "┘": (1, 1, 0, 0, 0), "┙": (2, 1, 0, 0, 0),
        "┚": (1, 2, 0, 0, 0), "┛": (2, 2, 0, 0, 0),
        "├": (0, 1, 1, 1, 0), "┝": (0, 1, 2, 1, 0),
        "┞": (0, 2, 1, 1, 0), "┟": (0, 1, 1, 2, 0),
        "┠": (0, 2, 1, 2, 0), "┡": (0, 2, 2, 1, 0),
        "┢": (0, 1, 2, 2, 0), "┣": (0, 2, 2, 2, 0),
        "┤": (1, 1, 0, 1, 0), "┥": (2, 1, 0, 1, 0),
        "┦": (1, 2, 0, 1, 0), "┧": (1, 1, 0, 2, 0),
        "┨": (1, 2, 0, 2, 0), "┩": (2, 2, 0, 1, 0),
        "┪": (2, 1, 0, 2, 0), "┫": (2, 2, 0, 2, 0),
        "┬": (1, 0, 1, 1, 0), "┭": (2, 0, 1, 1, 0),
        "┮": (1, 0, 2, 1, 0), "┯": (2, 0, 2, 1, 0),
        "┰": (1, 0, 1, 2, 0), "┱": (2, 0, 1, 2, 0),
        "┲": (1, 0, 2, 2, 0), "┳": (2, 0, 2, 2, 0),
        "┴": (1, 1, 1, 0, 0), "┵": (2, 1, 1, 0, 0),
        "┶": (1, 1, 2, 0, 0), "┷": (2, 1, 2, 0, 0),
        "┸": (1, 2, 1, 0, 0), "┹": (2, 2, 1, 0, 0),
        "┺": (1, 2, 2, 0, 0), "┻": (2, 2, 2, 0, 0),
        "┼": (1, 1, 1, 1, 0), "┽": (2, 1, 1, 1, 0),
        "┾": (1, 1, 2, 1, 0), "┿": (2, 1, 2, 1, 0),
        "╀": (1, 2, 1, 1, 0), "╁": (1, 1, 1, 2, 0),
        "╂": (1, 2, 1, 2, 0), "╃": (2, 2, 1, 1, 0),
        "╄": (1, 2, 2, 1, 0), "╅": (2, 1, 1, 2, 0),
        "╆": (1, 1, 2, 2, 0), "╇": (2, 2, 2, 1, 0),
        "╈": (2, 1, 2, 2, 0), "╉": (2, 2, 1, 2, 0),
        "╊": (1, 2, 2, 2, 0), "╋": (2, 2, 2, 2, 0),
        "═": (3, 0, 3, 0, 0), "║": (0, 3, 0, 3, 0),
        "╒": (0, 0, 3, 1, 0), "╓": (0, 0, 1, 3, 0), "╔": (0, 0, 3, 3, 0),
        "╕": (3, 0, 0, 1, 0), "╖": (1, 0, 0, 3, 0), "╗": (3, 0, 0, 3, 0),
        "╘": (0, 1, 3, 0, 0), "╙": (0, 3, 1, 0, 0), "╚": (0, 3, 3, 0, 0),
        "╛": (3, 1, 0, 0, 0), "╜": (1, 3, 0, 0, 0), "╝": (3, 3, 0, 0, 0),
        "╞": (0, 1, 3, 1, 0), "╟": (0, 3, 1, 3, 0), "╠": (0, 3, 3, 3, 0),
        "╡": (3, 1, 0, 1, 0), "╢": (1, 3, 0, 3, 0), "╣": (3, 3, 0, 3, 0),
        "╤": (3, 0, 3, 1, 0), "╥": (1, 0, 1, 3, 0), "╦": (3, 0, 3, 3, 0),
        "╧": (3, 1, 3, 0, 0), "╨": (1, 3, 1, 0, 0), "╩": (3, 3, 3, 0, 0),
        "╪": (3, 1, 3, 1, 0), "╫": (1, 3, 1, 3, 0), "╬": (3, 3, 3, 3, 0),
        "╭": (0, 0, 1, 1, 1), "╮": (1, 0, 0, 1, 1),
        "╯": (1, 1, 0, 0, 1), "╰": (0, 1, 1, 0, 1),
        "╴": (1, 0, 0, 0, 0), "╵": (0, 1, 0, 0, 0),
        "╶": (0, 0, 1, 0, 0), "╷": (0, 0, 0, 1, 0),
        "╸": (2, 0, 0, 0, 0), "╹": (0, 2, 0, 0, 0),
        "╺": (0, 0, 2, 0, 0), "╻": (0, 0, 0, 2, 0),
        "╼": (1, 0, 2, 0, 0), "╽": (0, 1, 0, 2, 0),
        "╾": (2, 0, 1, 0, 0), "╿": (0, 2, 0, 1, 0),
    }.items()
}

_TILE_DECODING: dict[_Tile, str] = {
    tile: glyph for glyph, tile in sorted(_TILE_ENCODING.items())
}


def _upgrade_left_right(left: str, right: str) -> tuple[str, str]:
    left_tile = _TILE_ENCODING.get(left)
    right_tile = _TILE_ENCODING.get(right)
    if left_tile is None or right_tile is None:
        return left, right

    if left_tile.right == 0 and right_tile.left != 0:
        left = _TILE_DECODING.get(left_tile._replace(right=right_tile.left), left)
    if right_tile.left == 0 and left_tile.right != 0:
        right = _TILE_DECODING.get(right_tile._replace(left=left_tile.right), right)
    return left, right


def _upgrade_top_down(top: str, down: str) -> tuple[str, str]:
    top_tile = _TILE_ENCODING.get(top)
    down_tile = _TILE_ENCODING.get(down)
    if top_tile is None or down_tile is None:
        return top, down

    if top_tile.down == 0 and down_tile.top != 0:
        top = _TILE_DECODING.get(top_tile._replace(down=down_tile.top), top)
    if down_tile.top == 0 and top_tile.down != 0:
        down = _TILE_DECODING.get(down_tile._replace(top=top_tile.down), down)
    return top, down


class Screen:
    """A rectangular grid of pixels that can be turned into terminal output."""

    def __init__(self, dimx: int, dimy: int) -> None:
        self.dimx = dimx
        self.dimy = dimy
        self.stencil = Box(0, dimx - 1, 0, dimy - 1)
        self.cursor: tuple[int, int] = (0, 0)
        self._pixels = self._blank_pixels()

    def _blank_pixels(self) -> list[list[Pixel]]:
        return [[Pixel() for _ in range(self.dimx)] for _ in range(self.dimy)]

    @classmethod
    def create(cls, width: Dimensions, height: Dimensions | None = None) -> Screen:
        """Create a screen using the width of ``width`` and the height of ``height``.

        With a single argument, both come from it.
        """
        if height is None:
            height = width
        return cls(width.dimx, height.dimy)

    def to_string(self) -> str:
        """Return the text, with escape sequences, that draws the screen."""
        parts: list[str] = []
        previous = Pixel()
        final = Pixel()
        for y, row in enumerate(self._pixels):
            if y:
                previous = _update_style(parts, previous, final)
                parts.append("\r\n")
            previous_fullwidth = False
            for pixel in row:
                if not previous_fullwidth:
                    previous = _update_style(parts, previous, pixel)
                    parts.append(pixel.character)
                previous_fullwidth = string_width(pixel.character) == 2
        _update_style(parts, previous, final)
        return "".join(parts)

    def print(self, stream: TextIO | None = None) -> None:
        """Write the screen to ``stream`` (stdout by default) and flush it."""
        if stream is None:
            stream = sys.stdout
        stream.write(self.to_string() + "\0")
        stream.flush()

    def at(self, x: int, y: int) -> str:
        """Return the character at (x, y); outside the screen, a blank."""
        return self.pixel_at(x, y).character

    def set_at(self, x: int, y: int, character: str) -> None:
        """Set the character at (x, y); writes outside the screen are dropped."""
        self.pixel_at(x, y).character = character

    def pixel_at(self, x: int, y: int) -> Pixel:
        """Return the pixel at (x, y).

        Outside the screen a detached pixel is returned, so writes to it are lost.
        """
        if self.stencil.contain(x, y):
            return self._pixels[y][x]
        return Pixel()

    def reset_position(self, clear: bool = False) -> str:
        """Return the text moving the cursor back to the screen's first cell.

        With ``clear``, every line passed over is erased as well.
        """
        step_up = _MOVE_UP + _CLEAR_LINE if clear else _MOVE_UP
        first = _MOVE_LEFT + _CLEAR_LINE if clear else _MOVE_LEFT
        return first + step_up * max(self.dimy - 1, 0)

    def clear(self) -> None:
        """Reset every pixel and place the cursor on the last cell."""
        self._pixels = self._blank_pixels()
        self.cursor = (self.dimx - 1, self.dimy - 1)

    def apply_shader(self) -> None:
        """Merge adjacent box-drawing characters into connected junctions."""
        for y in range(1, self.dimy):
            for x in range(1, self.dimx):
                current = self._pixels[y][x]
                if current.character not in _TILE_ENCODING:
                    continue

                left = self._pixels[y][x - 1]
                left.character, current.character = _upgrade_left_right(
                    left.character, current.character
                )

                top = self._pixels[y - 1][x]
                top.character, current.character = _upgrade_top_down(
                    top.character, current.character
                )

    def copy_pixel(self, x: int, y: int) -> Pixel:
        """Return an independent copy of the pixel at (x, y)."""
        return replace(self.pixel_at(x, y))