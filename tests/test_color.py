import pytest

from glyphscreen.color import Color, ColorType, Palette16
from glyphscreen.terminal import ColorSupport


def test_default_is_transparent():
    color = Color()
    assert color.color_type is ColorType.PALETTE1
    assert color.print(False) == "39"
    assert color.print(True) == "49"


def test_palette16_codes():
    assert Color.palette16(Palette16.RED).print(False) == "31"
    assert Color.palette16(Palette16.RED).print(True) == "41"
    assert Color.palette16(Palette16.GRAY_DARK).print(False) == "90"
    assert Color.palette16(Palette16.WHITE).print(True) == "107"


def test_palette16_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.palette16(16)


def test_palette256_kept_when_supported():
    color = Color.palette256(196, ColorSupport.PALETTE256)
    assert color.print(False) == "38;5;196"
    assert color.print(True) == "48;5;196"


def test_palette256_downgraded_without_support():
    color = Color.palette256(196, ColorSupport.PALETTE16)
    assert color == Color.palette16(Palette16.RED_LIGHT)


def test_palette256_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.palette256(256, ColorSupport.TRUE_COLOR)


def test_rgb_true_color():
    color = Color.rgb(1, 2, 3, ColorSupport.TRUE_COLOR)
    assert color.print(False) == "38;2;1;2;3"
    assert color.print(True) == "48;2;1;2;3"


def test_rgb_exact_palette_match():
    assert Color.rgb(255, 0, 0, ColorSupport.PALETTE256) == Color.palette256(
        196, ColorSupport.PALETTE256
    )


def test_rgb_palette16_fallback():
    assert Color.rgb(255, 0, 0, ColorSupport.PALETTE16) == Color.palette16(
        Palette16.RED_LIGHT
    )


def test_rgb_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.rgb(256, 0, 0, ColorSupport.TRUE_COLOR)
    with pytest.raises(ValueError):
        Color.rgb(0, -1, 0, ColorSupport.TRUE_COLOR)


def test_hsv_without_saturation_is_grey():
    assert Color.hsv(100, 0, 128, ColorSupport.TRUE_COLOR) == Color.rgb(
        128, 128, 128, ColorSupport.TRUE_COLOR
    )


@pytest.mark.parametrize("hue", range(0, 256, 17))
def test_hsv_brightest_channel_is_value(hue):
    color = Color.hsv(hue, 200, 180, ColorSupport.TRUE_COLOR)
    assert color.color_type is ColorType.TRUE_COLOR
    assert max(color.red, color.green, color.blue) == 180


def test_from_hex_splits_channels():
    assert Color.from_hex(0xFF8000, ColorSupport.TRUE_COLOR) == Color.rgb(
        255, 128, 0, ColorSupport.TRUE_COLOR
    )


def test_from_hex_rejects_too_large():
    with pytest.raises(ValueError):
        Color.from_hex(0x1000000, ColorSupport.TRUE_COLOR)


def test_equality_distinguishes_types():
    assert Color.palette16(Palette16.BLACK) != Color()
    assert Color.palette16(Palette16.BLUE) == Color.palette16(4)