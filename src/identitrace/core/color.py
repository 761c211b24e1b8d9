"""Colour helpers.

The foreground colour comes from the first three digest bytes. The background
is either an explicit hex colour or derived from the foreground on the colour
wheel (complementary or one of two split-complementary schemes).
"""

import re

from identitrace.config import BackgroundMode
from identitrace.exceptions import InvalidColorError

RGB = tuple[int, int, int]

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def integer_to_hex(value: int) -> str:
    """Two-digit upper-case hex for a channel value in 0..255.

    Raises:
        InvalidColorError: If the value is out of range
    """
    if not 0 <= value <= 255:
        raise InvalidColorError(value, "channel value must be in 0..255")
    return f"{value:02X}"


def hex_to_hex6(hex_color: str) -> str:
    """Expand a 3-digit hex colour to 6 digits; 6-digit colours pass through.

    The leading ``#`` is dropped.

    Examples:
        >>> hex_to_hex6("#fa0")
        'ffaa00'
    """
    digits = hex_color.removeprefix("#")
    if not _HEX_DIGITS.fullmatch(digits):
        raise InvalidColorError(hex_color, "not a hex colour")
    if len(digits) == 3:
        return "".join(c * 2 for c in digits)
    if len(digits) == 6:
        return digits
    raise InvalidColorError(hex_color, "expected 3 or 6 hex digits")


def hex_to_rgb(hex_color: str) -> RGB:
    """Parse a 3- or 6-digit hex colour, with or without ``#``."""
    digits = hex_to_hex6(hex_color)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex6(rgb: RGB) -> str:
    """Format channel values as ``#RRGGBB``."""
    return "#" + "".join(integer_to_hex(c) for c in rgb)


def foreground_color(digest: bytes) -> str:
    """Lower-case ``#rrggbb`` colour from the first three digest bytes."""
    if len(digest) < 3:
        raise InvalidColorError(digest.hex(), "digest shorter than 3 bytes")
    return rgb_to_hex6((digest[0], digest[1], digest[2])).lower()


def color_wheel(rgb: RGB, mode: BackgroundMode) -> RGB:
    """Complementary colour of an RGB triple.

    BASIC inverts all channels, SPLIT1 green and blue, SPLIT2 red and green.
    """
    r, g, b = rgb
    if mode == BackgroundMode.BASIC:
        return (255 - r, 255 - g, 255 - b)
    if mode == BackgroundMode.SPLIT1:
        return (r, 255 - g, 255 - b)
    return (255 - r, 255 - g, b)


def resolve_background(fg_color: str, background: BackgroundMode | str | None) -> str | None:
    """Resolve the background setting to a colour.

    Args:
        fg_color: Foreground colour as a hex string
        background: None for no background, a BackgroundMode (or its name)
            for a colour derived from the foreground, or a hex colour

    Returns:
        Background colour, or None when no background is drawn

    Raises:
        InvalidColorError: If the background is neither a mode nor a hex colour
    """
    if background is None:
        return None

    if not isinstance(background, BackgroundMode):
        try:
            background = BackgroundMode(background.lower())
        except ValueError:
            return "#" + hex_to_hex6(background).lower()

    wheel = color_wheel(hex_to_rgb(fg_color), background)
    return rgb_to_hex6(wheel).lower()
