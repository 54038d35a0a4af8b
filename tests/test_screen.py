import io
import os
from unittest import mock

from glyphscreen.color import Color, Palette16
from glyphscreen.screen import Pixel, Screen, fixed, full
from glyphscreen.string import utf8_to_glyphs
from glyphscreen.terminal import Dimensions


def _draw_text(screen, x, y, text):
    for offset, glyph in enumerate(utf8_to_glyphs(text)):
        screen.set_at(x + offset, y, glyph)


def _draw_row(screen, y, cells):
    for x, cell in enumerate(cells):
        screen.set_at(x, y, cell)


def test_empty_height_gives_empty_string():
    screen = Screen(2, 0)
    _draw_text(screen, 0, 0, "test")
    assert screen.to_string() == ""


def test_text_clipped_to_screen():
    screen = Screen(2, 1)
    _draw_text(screen, 0, 0, "test")
    assert screen.to_string() == "te"


def test_text_fits():
    screen = Screen(4, 1)
    _draw_text(screen, 0, 0, "test")
    assert screen.to_string() == "test"


def test_text_on_bigger_screen():
    screen = Screen(6, 2)
    _draw_text(screen, 0, 0, "test")
    assert screen.to_string() == "test  \r\n      "


def test_full_width_glyphs():
    screen = Screen(6, 3)
    _draw_row(screen, 0, ["╭", "─", "─", "─", "─", "╮"])
    _draw_row(screen, 1, ["│", "测", "", "试", "", "│"])
    _draw_row(screen, 2, ["╰", "─", "─", "─", "─", "╯"])
    assert screen.to_string() == "╭────╮\r\n│测试│\r\n╰────╯"


def test_cell_after_full_width_glyph_is_skipped():
    screen = Screen(5, 3)
    _draw_row(screen, 0, ["╭", "─", "─", "─", "╮"])
    _draw_row(screen, 1, ["│", "测", "", "试", "│"])
    _draw_row(screen, 2, ["╰", "─", "─", "─", "╯"])
    assert screen.to_string() == "╭───╮\r\n│测试\r\n╰───╯"


def test_at_and_out_of_bounds_writes_are_dropped():
    screen = Screen(2, 2)
    screen.set_at(1, 1, "x")
    screen.set_at(5, 5, "y")
    assert screen.at(1, 1) == "x"
    assert screen.at(5, 5) == " "
    assert screen.to_string() == "  \r\n x"


def test_bold_pixel_sets_and_resets():
    screen = Screen(1, 1)
    pixel = screen.pixel_at(0, 0)
    pixel.character = "a"
    pixel.bold = True
    assert screen.to_string() == "\x1b[1ma\x1b[22m"


def test_underlined_pixel_sets_and_resets():
    screen = Screen(1, 1)
    screen.pixel_at(0, 0).underlined = True
    assert screen.to_string() == "\x1b[4m \x1b[24m"


def test_foreground_color_emits_both_colors():
    screen = Screen(1, 1)
    screen.pixel_at(0, 0).foreground_color = Color.palette16(Palette16.RED)
    assert screen.to_string() == "\x1b[31m\x1b[49m \x1b[39m\x1b[49m"


def test_print_writes_output_and_terminator():
    screen = Screen(2, 1)
    _draw_text(screen, 0, 0, "ok")
    stream = io.StringIO()
    screen.print(stream)
    assert stream.getvalue() == "ok\0"


def test_reset_position():
    screen = Screen(3, 3)
    assert screen.reset_position() == "\r\x1b[1A\x1b[1A"
    assert screen.reset_position(True) == "\r\x1b[2K\x1b[1A\x1b[2K\x1b[1A\x1b[2K"


def test_clear_resets_pixels_and_cursor():
    screen = Screen(3, 2)
    _draw_text(screen, 0, 0, "abc")
    screen.pixel_at(1, 1).bold = True
    screen.clear()
    assert screen.to_string() == "   \r\n   "
    assert screen.cursor == (2, 1)
    assert screen.pixel_at(1, 1) == Pixel()


def test_apply_shader_merges_crossing_lines():
    screen = Screen(3, 3)
    _draw_row(screen, 0, ["a", "│", "b"])
    _draw_row(screen, 1, ["─", "─", "─"])
    _draw_row(screen, 2, ["c", "│", "d"])
    screen.apply_shader()
    assert screen.to_string() == "a│b\r\n─┼─\r\nc│d"


def test_apply_shader_mixes_light_and_double():
    screen = Screen(3, 3)
    _draw_row(screen, 0, [" ", "║", " "])
    _draw_row(screen, 1, ["─", "─", "─"])
    _draw_row(screen, 2, [" ", "║", " "])
    screen.apply_shader()
    assert screen.at(1, 1) == "╫"


def test_apply_shader_leaves_text_alone():
    screen = Screen(3, 2)
    _draw_text(screen, 0, 0, "abc")
    _draw_text(screen, 0, 1, "def")
    screen.apply_shader()
    assert screen.to_string() == "abc\r\ndef"


def test_create_from_dimensions():
    screen = Screen.create(fixed(3), Dimensions(7, 2))
    assert (screen.dimx, screen.dimy) == (3, 2)
    square = Screen.create(Dimensions(4, 5))
    assert (square.dimx, square.dimy) == (4, 5)


def test_fixed_is_square():
    assert fixed(9) == Dimensions(9, 9)


def test_full_uses_terminal_size():
    with mock.patch("os.get_terminal_size", return_value=os.terminal_size((100, 40))):
        assert full() == Dimensions(100, 40)


def test_copy_pixel_is_independent():
    screen = Screen(1, 1)
    copy = screen.copy_pixel(0, 0)
    copy.character = "z"
    assert screen.at(0, 0) == " "