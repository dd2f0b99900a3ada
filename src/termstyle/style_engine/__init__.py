"""Terminal Style Engine Package.

This package provides the style registry for terminal output: fixed control
sequences, foreground/background palettes with RGB encoding, validated
formatting, progress and file listing styles, and hyperlink formatting.
"""

from .registry import StyleRegistry, get_style
from .extensions import ExtensionDecorationMap
from .schema import (
    # Style groups
    ForegroundColor,
    BackgroundColor,
    FormattingData,
    ProgressConfiguration,
    FileInfoFormatting,

    # Enums
    OutputRendering,
    ProgressView,

    # Constants
    StyleString,
    MIN_PROGRESS_WIDTH,
)
from .validation import (
    StyleError,
    StyleContentError,
    InvalidExtensionError,
    DuplicateExtensionError,
    StyleRangeError,
    content_length,
    to_plain_text,
    validate_no_content,
)
from .utils import (
    sgr,
    rgb_sequence,
    hex_to_rgb,
    format_hyperlink,
)

__all__ = [
    # Main classes
    "StyleRegistry",
    "get_style",
    "ExtensionDecorationMap",

    # Style groups
    "ForegroundColor",
    "BackgroundColor",
    "FormattingData",
    "ProgressConfiguration",
    "FileInfoFormatting",

    # Enums
    "OutputRendering",
    "ProgressView",

    # Constants
    "StyleString",
    "MIN_PROGRESS_WIDTH",

    # Errors
    "StyleError",
    "StyleContentError",
    "InvalidExtensionError",
    "DuplicateExtensionError",
    "StyleRangeError",

    # Utilities
    "content_length",
    "to_plain_text",
    "validate_no_content",
    "sgr",
    "rgb_sequence",
    "hex_to_rgb",
    "format_hyperlink",
]
