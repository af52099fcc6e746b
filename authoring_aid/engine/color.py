"""Hex color parsing and the RGB color value type."""

import re
from dataclasses import dataclass
from typing import Union


HEX_COLOR_PATTERN = re.compile(r'#?([0-9a-fA-F]{6})')


class InvalidColorFormat(ValueError):
    """Raised when a color is not a 6-digit hex string or has out-of-range channels."""

    def __init__(self, value, reason: str = "expected #rrggbb or rrggbb"):
        self.value = value
        super().__init__(f"Invalid color {value!r}: {reason}")


@dataclass(frozen=True)
class Color:
    """A 24-bit RGB color."""
    red: int
    green: int
    blue: int

    def __post_init__(self):
        for channel in (self.red, self.green, self.blue):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise InvalidColorFormat(
                    (self.red, self.green, self.blue),
                    "channels must be integers in [0, 255]"
                )

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """Parse ``#rrggbb`` or ``rrggbb`` (case-insensitive)."""
        if not isinstance(value, str):
            raise InvalidColorFormat(value)

        match = HEX_COLOR_PATTERN.fullmatch(value)
        if not match:
            raise InvalidColorFormat(value)

        digits = match.group(1)
        return cls(
            red=int(digits[0:2], 16),
            green=int(digits[2:4], 16),
            blue=int(digits[4:6], 16),
        )

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def channels(self):
        return self.red, self.green, self.blue

    def __str__(self):
        return self.to_hex()


ColorLike = Union[Color, str]


def parse_color(value: ColorLike) -> Color:
    """Accept a Color as-is or parse a hex string into one."""
    if isinstance(value, Color):
        return value
    return Color.from_hex(value)
