"""Minecraft text colours: arbitrary RGB colours and the sixteen named colours."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from typing import Union

__all__ = [
    "InvalidFormatError",
    "RGB",
    "Named",
    "Color",
    "parse_hex",
    "hex_int",
    "BLACK",
    "DARK_BLUE",
    "DARK_GREEN",
    "DARK_AQUA",
    "DARK_RED",
    "DARK_PURPLE",
    "GOLD",
    "GRAY",
    "DARK_GRAY",
    "BLUE",
    "GREEN",
    "AQUA",
    "RED",
    "LIGHT_PURPLE",
    "YELLOW",
    "WHITE",
    "NAMES_ORDER",
    "NAMES",
]


class InvalidFormatError(ValueError):
    """Raised when a hex colour string is malformed."""

    def __init__(self, message: str = "color.Hex: invalid format") -> None:
        super().__init__(message)


def _to_byte(channel: float) -> int:
    return max(0, min(255, int(channel * 255.0 + 0.5)))


@dataclass(frozen=True)
class RGB:
    """A colour with red, green and blue channels in the range 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def hex(self) -> str:
        """Return the colour in html form, such as ``#ff0080``."""
        return "#{:02x}{:02x}{:02x}".format(
            _to_byte(self.r), _to_byte(self.g), _to_byte(self.b)
        )

    def distance(self, other: "RGB | Named") -> float:
        """Euclidean distance between two colours in RGB space."""
        if isinstance(other, Named):
            other = other.rgb
        return math.sqrt(
            (self.r - other.r) ** 2 + (self.g - other.g) ** 2 + (self.b - other.b) ** 2
        )

    def rgba(self) -> tuple[int, int, int, int]:
        """Return 16-bit alpha-premultiplied channels (alpha is always opaque)."""
        return (
            int(self.r * 65535.0 + 0.5),
            int(self.g * 65535.0 + 0.5),
            int(self.b * 65535.0 + 0.5),
            0xFFFF,
        )

    def nearest_named(self) -> "Named":
        """Return the named colour closest to this one."""
        match = BLACK
        best = math.inf
        for candidate in NAMES_ORDER:
            if candidate.rgb is self:
                return candidate
            dist = self.distance(candidate.rgb)
            if dist == 0:
                return candidate
            if dist < best:
                match = candidate
                best = dist
        return match

    def named(self) -> "Named":
        """Return the exact or nearest named colour."""
        return self.nearest_named()

    def __str__(self) -> str:
        return self.hex()


@dataclass(frozen=True)
class Named:
    """One of Minecraft's named text colours."""

    name: str
    rgb: RGB

    @property
    def r(self) -> float:
        return self.rgb.r

    @property
    def g(self) -> float:
        return self.rgb.g

    @property
    def b(self) -> float:
        return self.rgb.b

    def hex(self) -> str:
        """Return the colour in html form, such as ``#ff5555``."""
        return self.rgb.hex()

    def named(self) -> "Named":
        """A named colour is its own nearest named colour."""
        return self

    def __str__(self) -> str:
        return self.name


Color = Union[RGB, Named]


def hex_int(value: int) -> RGB:
    """Build a colour from an integer such as ``0xffaa00``."""
    return RGB(
        ((value >> 16) & 0xFF) / 255,
        ((value >> 8) & 0xFF) / 255,
        (value & 0xFF) / 255,
    )


def parse_hex(text: str) -> RGB:
    """Parse a web colour in ``#rgb`` or ``#rrggbb`` form."""
    if not text.startswith("#"):
        raise InvalidFormatError()
    digits = text[1:]
    if len(digits) not in (3, 6) or any(ch not in string.hexdigits for ch in digits):
        raise InvalidFormatError()
    if len(digits) == 6:
        channels = [int(digits[i : i + 2], 16) for i in (0, 2, 4)]
    else:
        channels = [int(ch, 16) * 17 for ch in digits]
    red, green, blue = channels
    return RGB(red / 255, green / 255, blue / 255)


BLACK = Named("black", hex_int(0x000000))
DARK_BLUE = Named("dark_blue", hex_int(0x0000AA))
DARK_GREEN = Named("dark_green", hex_int(0x00AA00))
DARK_AQUA = Named("dark_aqua", hex_int(0x00AAAA))
DARK_RED = Named("dark_red", hex_int(0xAA0000))
DARK_PURPLE = Named("dark_purple", hex_int(0xAA00AA))
GOLD = Named("gold", hex_int(0xFFAA00))
GRAY = Named("gray", hex_int(0xAAAAAA))
DARK_GRAY = Named("dark_gray", hex_int(0x555555))
BLUE = Named("blue", hex_int(0x5555FF))
GREEN = Named("green", hex_int(0x55FF55))
AQUA = Named("aqua", hex_int(0x55FFFF))
RED = Named("red", hex_int(0xFF5555))
LIGHT_PURPLE = Named("light_purple", hex_int(0xFF55FF))
YELLOW = Named("yellow", hex_int(0xFFFF55))
WHITE = Named("white", hex_int(0xFFFFFF))

NAMES_ORDER: tuple[Named, ...] = (
    BLACK,
    DARK_BLUE,
    DARK_GREEN,
    DARK_AQUA,
    DARK_RED,
    DARK_PURPLE,
    GOLD,
    GRAY,
    DARK_GRAY,
    BLUE,
    GREEN,
    AQUA,
    RED,
    LIGHT_PURPLE,
    YELLOW,
    WHITE,
)

NAMES: dict[str, Named] = {named.name: named for named in NAMES_ORDER}