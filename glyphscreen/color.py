"""Terminal colours and their SGR escape parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from glyphscreen.color_info import get_color_info
from glyphscreen.terminal import ColorSupport, color_support

# Foreground and background SGR codes of the 16-colour palette.
_PALETTE16_CODES: tuple[tuple[str, str], ...] = (
    ("30", "40"), ("31", "41"), ("32", "42"), ("33", "43"),
    ("34", "44"), ("35", "45"), ("36", "46"), ("37", "47"),
    ("90", "100"), ("91", "101"), ("92", "102"), ("93", "103"),
    ("94", "104"), ("95", "105"), ("96", "106"), ("97", "107"),
)


class ColorType(Enum):
    """The palette a colour is expressed in."""

    PALETTE1 = "palette1"
    PALETTE16 = "palette16"
    PALETTE256 = "palette256"
    TRUE_COLOR = "true_color"


class Palette16(IntEnum):
    """The 16 basic terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    GRAY_LIGHT = 7
    GRAY_DARK = 8
    RED_LIGHT = 9
    GREEN_LIGHT = 10
    YELLOW_LIGHT = 11
    BLUE_LIGHT = 12
    MAGENTA_LIGHT = 13
    CYAN_LIGHT = 14
    WHITE = 15


def _check_range(name: str, value: int, upper: int) -> int:
    value = int(value)
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be within 0..{upper}, got {value}")
    return value


def _support(support: ColorSupport | None) -> ColorSupport:
    return color_support() if support is None else support


@dataclass(frozen=True)
class Color:
    """A colour; the default value is the terminal's own (transparent) colour."""

    color_type: ColorType = ColorType.PALETTE1
    index: int = 0
    red: int = 0
    green: int = 0
    blue: int = 0

    def print(self, is_background_color: bool = False) -> str:
        """Return the SGR parameters selecting this colour."""
        if self.color_type is ColorType.PALETTE1:
            return "49" if is_background_color else "39"
        if self.color_type is ColorType.PALETTE16:
            return _PALETTE16_CODES[self.index][1 if is_background_color else 0]
        if self.color_type is ColorType.PALETTE256:
            prefix = "48;5;" if is_background_color else "38;5;"
            return f"{prefix}{self.index}"
        prefix = "48;2;" if is_background_color else "38;2;"
        return f"{prefix}{self.red};{self.green};{self.blue}"

    @classmethod
    def palette16(cls, index: int) -> Color:
        """Build a colour from the 16-colour palette."""
        return cls(ColorType.PALETTE16, _check_range("index", index, 15))

    @classmethod
    def palette256(cls, index: int, support: ColorSupport | None = None) -> Color:
        """Build a colour from the 256-colour palette.

        Falls back to the nearest 16-colour entry when the terminal lacks
        256-colour support.
        """
        index = _check_range("index", index, 255)
        if _support(support) >= ColorSupport.PALETTE256:
            return cls(ColorType.PALETTE256, index)
        return cls(ColorType.PALETTE16, get_color_info(index).index_16)

    @classmethod
    def rgb(
        cls, red: int, green: int, blue: int, support: ColorSupport | None = None
    ) -> Color:
        """Build a colour from its RGB components, each within 0..255.

        Falls back to the closest palette colour the terminal can show.
        """
        red = _check_range("red", red, 255)
        green = _check_range("green", green, 255)
        blue = _check_range("blue", blue, 255)
        support = _support(support)
        if support == ColorSupport.TRUE_COLOR:
            return cls(ColorType.TRUE_COLOR, 0, red, green, blue)

        def distance(position: int) -> int:
            info = get_color_info(position)
            return (
                (info.red - red) ** 2
                + (info.green - green) ** 2
                + (info.blue - blue) ** 2
            )

        best = min(range(16, 256), key=distance)
        if support == ColorSupport.PALETTE256:
            return cls(ColorType.PALETTE256, best)
        return cls(ColorType.PALETTE16, get_color_info(best).index_16)

    @classmethod
    def hsv(
        cls, h: int, s: int, v: int, support: ColorSupport | None = None
    ) -> Color:
        """Build a colour from hue, saturation and value, each within 0..255."""
        h = _check_range("h", h, 255)
        s = _check_range("s", s, 255)
        v = _check_range("v", v, 255)
        if s == 0:
            return cls.rgb(v, v, v, support)

        region = h // 43
        remainder = ((h - region * 43) * 6) & 0xFF
        p = (v * (255 - s)) >> 8
        q = (v * (255 - ((s * remainder) >> 8))) >> 8
        t = (v * (255 - ((s * (255 - remainder)) >> 8))) >> 8

        channels = {
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
            5: (v, p, q),
        }.get(region, (0, 0, 0))
        return cls.rgb(*channels, support)

    @classmethod
    def from_hex(cls, combined: int, support: ColorSupport | None = None) -> Color:
        """Build a colour from a 0xRRGGBB integer."""
        combined = _check_range("combined", combined, 0xFFFFFF)
        return cls.rgb(
            (combined >> 16) & 0xFF, (combined >> 8) & 0xFF, combined & 0xFF, support
        )