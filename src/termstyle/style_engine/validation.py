"""Content validation for style strings.

A style string is pure decoration: it may carry terminal control sequences
(colors, attributes, hyperlink markers) but never text that would render.
This module measures renderable content with Rich's ANSI decoder and defines
the errors raised when a value breaks that rule.
"""

import logging
from typing import Any, Optional

from rich.text import Text

logger = logging.getLogger(__name__)


class StyleError(Exception):
    """Base class for style registry errors."""


class StyleContentError(StyleError):
    """Exception raised when a style value contains renderable text."""

    def __init__(self, value: str, plain_text: str, field_name: Optional[str] = None):
        self.value = value
        self.plain_text = plain_text
        self.field_name = field_name
        target = f"'{field_name}' " if field_name else ""
        super().__init__(
            f"Style value {target}must only contain control sequences, "
            f"but renders as text: {plain_text!r}"
        )


class InvalidExtensionError(StyleError):
    """Exception raised when a file extension key does not start with a period."""

    def __init__(self, extension: Any):
        self.extension = extension
        super().__init__(f"Extension must start with a period: {extension!r}")


class DuplicateExtensionError(StyleError):
    """Exception raised when adding an extension that is already registered."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Extension already has a decoration: {extension!r}")


class StyleRangeError(StyleError):
    """Exception raised when a numeric setting is outside its allowed range."""

    def __init__(self, field_name: str, value: int, minimum: int):
        self.field_name = field_name
        self.value = value
        self.minimum = minimum
        super().__init__(f"'{field_name}' must be at least {minimum}, got {value}")


def to_plain_text(value: str) -> str:
    """Render a decorated string as plain text.

    Args:
        value: String that may contain ANSI control sequences

    Returns:
        The visible text with every recognised control sequence removed
    """
    # Rich keeps only what follows the last carriage return on a line.
    return Text.from_ansi(value.replace("\r", "")).plain


def content_length(value: str) -> int:
    """Count the characters of ``value`` that would render visibly."""
    return len(to_plain_text(value))


def validate_no_content(value: str, field_name: Optional[str] = None) -> str:
    """Validate that a style value contains control sequences only.

    Args:
        value: Candidate style string
        field_name: Optional name of the field being set, for diagnostics

    Returns:
        The value, unchanged

    Raises:
        TypeError: If the value is not a string
        StyleContentError: If the value contains renderable text
    """
    if not isinstance(value, str):
        raise TypeError(f"Style value must be a string, got {type(value).__name__}")

    plain_text = to_plain_text(value)
    if plain_text:
        logger.debug(f"Rejected style value for {field_name or 'decoration'}: {value!r}")
        raise StyleContentError(value, plain_text, field_name)
    return value


def validate_extension(extension: Any) -> str:
    """Validate that an extension key starts with a period.

    Raises:
        InvalidExtensionError: If the extension is not a string or lacks the period
    """
    if not isinstance(extension, str) or not extension.startswith("."):
        raise InvalidExtensionError(extension)
    return extension
