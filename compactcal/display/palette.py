"""Named background colors and ANSI style rendering."""

from dataclasses import dataclass
from typing import Optional

RGB = tuple[int, int, int]

RESET = "\033[0m"

# SGR effect codes
DIM = 2
UNDERLINE = 4
STRIKETHROUGH = 9
BLACK_FOREGROUND = 30


@dataclass(frozen=True)
class ColorValue:
    """Normal and dimmed 24-bit variants of one palette entry."""

    normal: RGB
    dimmed: RGB


@dataclass(frozen=True)
class Style:
    """Composable text style rendered as a single SGR escape sequence."""

    background: Optional[RGB] = None
    black_text: bool = False
    dim: bool = False
    underline: bool = False
    strikethrough: bool = False

    def is_plain(self) -> bool:
        return self == Style()

    def codes(self) -> list[str]:
        codes = []
        if self.dim:
            codes.append(str(DIM))
        if self.underline:
            codes.append(str(UNDERLINE))
        if self.strikethrough:
            codes.append(str(STRIKETHROUGH))
        if self.black_text:
            codes.append(str(BLACK_FOREGROUND))
        if self.background is not None:
            red, green, blue = self.background
            codes.append(f"48;2;{red};{green};{blue}")
        return codes

    def apply(self, text: str) -> str:
        """Wrap ``text`` in this style, or return it untouched for a plain style."""
        if self.is_plain():
            return text
        return f"\033[{';'.join(self.codes())}m{text}{RESET}"


class ColorPalette:
    """Lookup of named colors, honouring an explicit enable flag."""

    COLORS: dict[str, ColorValue] = {
        "orange": ColorValue((255, 143, 64), (178, 100, 45)),
        "yellow": ColorValue((230, 180, 80), (161, 126, 56)),
        "green": ColorValue((170, 217, 76), (119, 152, 53)),
        "blue": ColorValue((89, 194, 255), (62, 136, 179)),
        "purple": ColorValue((210, 166, 255), (147, 116, 179)),
        "red": ColorValue((240, 113, 120), (168, 79, 84)),
        "cyan": ColorValue((149, 230, 203), (104, 161, 142)),
        "gray": ColorValue((95, 99, 110), (67, 69, 77)),
        "light_orange": ColorValue((255, 180, 84), (179, 126, 59)),
        "light_yellow": ColorValue((249, 175, 79), (174, 123, 55)),
        "light_green": ColorValue((145, 179, 98), (102, 125, 69)),
        "light_blue": ColorValue((83, 189, 250), (58, 132, 175)),
        "light_purple": ColorValue((210, 166, 255), (147, 116, 179)),
        "light_red": ColorValue((234, 108, 115), (164, 76, 81)),
        "light_cyan": ColorValue((144, 225, 198), (101, 158, 139)),
    }

    def __init__(self, colors_enabled: bool = True) -> None:
        self.colors_enabled = colors_enabled

    @classmethod
    def available_colors(cls) -> list[str]:
        return list(cls.COLORS)

    @classmethod
    def get_color_value(cls, name: str) -> Optional[ColorValue]:
        return cls.COLORS.get(name)

    @classmethod
    def is_known_color(cls, name: str) -> bool:
        return name in cls.COLORS

    def get_style(self, color_name: str, dimmed: bool = False) -> Style:
        """Background style for ``color_name``; plain when disabled or unknown."""
        if not self.colors_enabled:
            return Style()

        color_value = self.get_color_value(color_name)
        if color_value is None:
            return Style()
        return Style(background=color_value.dimmed if dimmed else color_value.normal)

    def get_highlight_style(self, color_name: str, dimmed: bool = False) -> Style:
        """Background color with black text, as used for colored cells and annotations."""
        if not self.colors_enabled:
            return Style()
        base = self.get_style(color_name, dimmed)
        return Style(background=base.background, black_text=True)
