"""Utility functions for building terminal control sequences.

This module provides the escape-sequence primitives used by the style
registry: SGR builders, 24-bit RGB encoding, hex parsing, and OSC 8
hyperlinks.
"""

import re
from typing import Tuple

ESC = "\x1b"
CSI = f"{ESC}["
OSC = f"{ESC}]"
ST = f"{ESC}\\"

_HEX_COLOR = re.compile(r'^#?([0-9A-Fa-f]{6})$')


def sgr(*codes) -> str:
    """Build a Select Graphic Rendition sequence.

    Args:
        *codes: SGR parameters (e.g. 31, 1)

    Returns:
        Sequence such as ``ESC[31;1m``
    """
    return f"{CSI}{';'.join(str(code) for code in codes)}m"


def rgb_sequence(red: int, green: int, blue: int, background: bool = False) -> str:
    """Build a 24-bit direct color sequence.

    Components are reduced to their low byte, so any integer is accepted.

    Args:
        red, green, blue: Color components 0-255
        background: Use the background selector (48) instead of foreground (38)

    Returns:
        Sequence such as ``ESC[38;2;255;0;0m``
    """
    selector = 48 if background else 38
    return sgr(selector, 2, red & 0xFF, green & 0xFF, blue & 0xFF)


def unpack_rgb(packed: int) -> Tuple[int, int, int]:
    """Split a packed ``0xRRGGBB`` integer into its components."""
    blue = packed & 0xFF
    packed >>= 8
    green = packed & 0xFF
    packed >>= 8
    red = packed & 0xFF
    return (red, green, blue)


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple.

    Args:
        hex_color: Hex color string (e.g., '#FF0000' or 'FF0000')

    Returns:
        RGB tuple (r, g, b) with values 0-255

    Raises:
        ValueError: If hex_color is not a valid hex color
    """
    match = _HEX_COLOR.match(hex_color.strip())
    if not match:
        raise ValueError(f"Invalid hex color: {hex_color}")
    return unpack_rgb(int(match.group(1), 16))


def format_hyperlink(text: str, uri: str) -> str:
    """Wrap text in an OSC 8 hyperlink.

    The result intentionally contains visible text, so it is never stored in
    the registry or passed through content validation.
    """
    return f"{OSC}8;;{uri}{ST}{text}{OSC}8;;{ST}"


def escape_sequence(value: str) -> str:
    """Make control characters in a style string printable (ESC -> ``\\x1b``)."""
    return value.encode("unicode_escape").decode("ascii")


def unescape_sequence(value: str) -> str:
    """Interpret backslash escapes typed on a command line (``\\x1b[31m``, ``\\e[1m``)."""
    value = value.replace("\\e", "\\x1b").replace("\\E", "\\x1b")
    return value.encode("latin-1", "backslashreplace").decode("unicode_escape")
