# glyphscreen

`glyphscreen` is a small library for building terminal output one character cell at a time. It has no dependencies outside the standard library.

## What it provides

- **`glyphscreen.string`**: Unicode-aware cell widths.
  - `string_width(text)` counts the terminal cells that a text takes. Full-width (CJK) glyphs count as two cells. Combining marks and control characters count as none.
  - `utf8_to_glyphs(text)` splits text into one string per cell. It attaches combining marks to the glyph before them and drops control characters. After a full-width glyph it adds an empty string for the second cell.
  - `codepoint_width`, `is_control`, `is_combining` and `is_full_width` classify single codepoints. `codepoint_width` returns -1 for control characters.
- **`glyphscreen.box`**: `Box`, a rectangle with inclusive bounds. It has `Box.intersection(a, b)` and `box.contain(x, y)`.
- **`glyphscreen.terminal`**: terminal queries.
  - `terminal_size()` returns the size of the terminal on stdout as a `Dimensions(dimx, dimy)`. When the size cannot be detected, it returns a fallback size, which you can change with `set_fallback_size`.
  - `compute_color_support(environ)` guesses a `ColorSupport` level from `COLORTERM` and `TERM`. The levels are `PALETTE16`, `PALETTE256` and `TRUE_COLOR`.
  - `color_support()` caches that guess for the current process. `reset_color_support_cache()` clears the cache.
- **`glyphscreen.color_info`**: `get_color_info(index)` returns a `ColorInfo` for an entry of the 256-color palette. The record holds the name, both palette indices, RGB and HSV. An index outside 0..255 raises `ValueError`.
- **`glyphscreen.color`**: `Color`, a frozen dataclass.
  - `Color()` is the terminal's default color.
  - The constructors are `Color.palette16`, `Color.palette256`, `Color.rgb`, `Color.hsv` and `Color.from_hex`. Each takes an optional `support` argument, which defaults to the detected color support. A color the terminal cannot show falls back to the nearest palette entry.
  - Components out of range raise `ValueError`.
  - `color.print(is_background_color)` returns the SGR parameters, for example `"38;2;255;0;0"`.
  - `Palette16` names the 16 basic colors.
- **`glyphscreen.screen`**: `Screen`, a grid of `Pixel` cells.
  - Each `Pixel` has a character, the style flags bold, dim, underlined, blink and inverted, and foreground and background colors.
  - `to_string()` renders the grid with ANSI escape sequences and separates rows with `\r\n`. `print(stream)` writes the same output, followed by a NUL character, and flushes the stream.
  - `Screen.create(width, height)` builds a screen from `Dimensions`. The helpers `fixed(n)` and `full()` make those dimensions.
  - `apply_shader()` merges adjacent box-drawing characters into the right junctions, such as `┼`, `├` and `╫`.

## Installation

```
pip install glyphscreen
```

## Example

```python
import sys

from glyphscreen.color import Color
from glyphscreen.screen import Screen

screen = Screen(12, 3)
for x, glyph in enumerate("hello"):
    screen.set_at(x, 0, glyph)

pixel = screen.pixel_at(0, 1)
pixel.character = "!"
pixel.bold = True
pixel.foreground_color = Color.rgb(255, 0, 0)

screen.print(sys.stdout)
```

Writes to cells outside the screen are ignored. Outside the screen, `at` returns a blank and `pixel_at` returns a detached pixel. `copy_pixel(x, y)` returns an independent copy of a cell.

To redraw in place, write `screen.reset_position(clear=True)` before the next frame. It moves the cursor back to the first cell and erases the lines it passes over. Call `screen.clear()` to blank every cell.

## Measuring text

```python
from glyphscreen.string import string_width, utf8_to_glyphs

string_width("测试")    # 4
utf8_to_glyphs("测")    # ["测", ""]
```

## What it does not do

`glyphscreen` is only the cell buffer and what it needs to render. It does not provide:

- a layout or widget tree: no text, box or table elements that lay themselves out on a screen;
- keyboard or mouse input;
- an interactive event loop.

You fill the cells yourself and print the result.

## Running the tests

```
pip install -e ".[test]"
pytest
```