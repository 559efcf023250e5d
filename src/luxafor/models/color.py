"""Color model for the light."""

import string
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from luxafor.exceptions import InvalidColorError


class NamedColor(str, Enum):
    """Preset colors understood by both USB and webhook lights."""

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    WHITE = "white"
    CYAN = "cyan"
    MAGENTA = "magenta"

    def __str__(self) -> str:
        return self.value

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Fixed RGB triple sent to USB devices for this preset."""
        return _NAMED_RGB[self]


_NAMED_RGB = {
    NamedColor.RED: (255, 0, 0),
    NamedColor.GREEN: (0, 255, 0),
    NamedColor.YELLOW: (255, 255, 0),
    NamedColor.BLUE: (0, 0, 255),
    NamedColor.WHITE: (255, 255, 255),
    NamedColor.CYAN: (0, 255, 255),
    NamedColor.MAGENTA: (255, 0, 255),
}


class CustomColor(BaseModel):
    """Standard 8-bit RGB color.

    The model is frozen so colors behave as values: hashable, comparable,
    never mutated between commands.
    """

    model_config = ConfigDict(frozen=True)

    red: int = Field(ge=0, le=255, description="Red (0-255)")
    green: int = Field(ge=0, le=255, description="Green (0-255)")
    blue: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def off(cls) -> "CustomColor":
        """Create off (black) color."""
        return cls(red=0, green=0, blue=0)

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.red, self.green, self.blue)

    def __str__(self) -> str:
        """Six lowercase hex digits, e.g. '010203'."""
        return f"{self.red:02x}{self.green:02x}{self.blue:02x}"


Color = Union[NamedColor, CustomColor]


def parse_color(token: str) -> Color:
    """
    Parse a color name or 6 digit hex value.

    Named colors are matched case-insensitively. Any other 6 character
    hex string becomes a CustomColor where each channel is read from a
    single hex digit at offsets 0, 2 and 4, so "ff8800" parses as
    (15, 8, 0). This matches the behaviour of the Luxafor reference
    tooling and is kept for compatibility.

    Args:
        token: User supplied color string

    Returns:
        NamedColor or CustomColor

    Raises:
        InvalidColorError: If the token is neither a preset nor 6 hex digits

    Example:
        >>> parse_color("RED")
        <NamedColor.RED: 'red'>
        >>> str(parse_color("a0b0c0"))
        '0a0b0c'
    """
    value = token.lower()
    try:
        return NamedColor(value)
    except ValueError:
        pass

    if len(value) != 6 or not all(c in string.hexdigits for c in value):
        raise InvalidColorError(token)

    return CustomColor(
        red=int(value[0], 16),
        green=int(value[2], 16),
        blue=int(value[4], 16),
    )
