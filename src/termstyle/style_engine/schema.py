"""Style schema definitions for the terminal style registry.

This module defines the Pydantic models that hold every style group the
registry owns: the fixed foreground/background palettes, formatting
categories for output streams, progress bar configuration, and file listing
decorations. Settable style fields are validated on every assignment so a
group can never hold a value that renders text.
"""

from enum import Enum
from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .extensions import ExtensionDecorationMap
from .utils import rgb_sequence, sgr, unpack_rgb
from .validation import StyleRangeError, validate_no_content

# A string of terminal control sequences with no renderable content
StyleString = str

MIN_PROGRESS_WIDTH = 18


class OutputRendering(str, Enum):
    """How the host renders decorated output"""
    AUTOMATIC = "automatic"
    PLAIN_TEXT = "plain_text"
    ANSI = "ansi"
    HOST = "host"


class ProgressView(str, Enum):
    """Progress bar layouts"""
    MINIMAL = "minimal"
    CLASSIC = "classic"


class _ColorPalette(BaseModel):
    """Named colors plus a 24-bit encoder for one color plane."""

    model_config = ConfigDict(frozen=True)

    background_plane: ClassVar[bool] = False

    @field_validator('*')
    @classmethod
    def validate_color(cls, v, info: ValidationInfo):
        """Reject colors that render text"""
        return validate_no_content(v, info.field_name)

    def from_rgb(self, red: int, green: Optional[int] = None, blue: Optional[int] = None) -> StyleString:
        """Build a direct color sequence.

        Accepts either three components or a single packed ``0xRRGGBB``
        integer.

        Args:
            red: Red component, or the packed color when used alone
            green: Green component
            blue: Blue component

        Returns:
            Control sequence selecting the color
        """
        if green is None and blue is None:
            red, green, blue = unpack_rgb(red)
        elif green is None or blue is None:
            raise TypeError("from_rgb() takes either one packed value or three components")

        return rgb_sequence(red, green, blue, background=self.background_plane)

    @classmethod
    def names(cls) -> List[str]:
        """Get the color names in declaration order."""
        return list(cls.model_fields)


class ForegroundColor(_ColorPalette):
    """Foreground colors"""

    black: StyleString = sgr(30)
    red: StyleString = sgr(31)
    green: StyleString = sgr(32)
    yellow: StyleString = sgr(33)
    blue: StyleString = sgr(34)
    magenta: StyleString = sgr(35)
    cyan: StyleString = sgr(36)
    white: StyleString = sgr(37)
    dark_gray: StyleString = sgr(90)
    light_red: StyleString = sgr(91)
    light_green: StyleString = sgr(92)
    light_yellow: StyleString = sgr(93)
    light_blue: StyleString = sgr(94)
    light_magenta: StyleString = sgr(95)
    light_cyan: StyleString = sgr(96)
    light_gray: StyleString = sgr(97)


class BackgroundColor(_ColorPalette):
    """Background colors"""

    background_plane: ClassVar[bool] = True

    black: StyleString = sgr(40)
    red: StyleString = sgr(41)
    green: StyleString = sgr(42)
    yellow: StyleString = sgr(43)
    blue: StyleString = sgr(44)
    magenta: StyleString = sgr(45)
    cyan: StyleString = sgr(46)
    white: StyleString = sgr(47)
    dark_gray: StyleString = sgr(100)
    light_red: StyleString = sgr(101)
    light_green: StyleString = sgr(102)
    light_yellow: StyleString = sgr(103)
    light_blue: StyleString = sgr(104)
    light_magenta: StyleString = sgr(105)
    light_cyan: StyleString = sgr(106)
    light_gray: StyleString = sgr(107)


class FormattingData(BaseModel):
    """Styles for output streams and formatted objects"""

    model_config = ConfigDict(validate_assignment=True)

    format_accent: StyleString = Field(sgr(32, 1), description="Accent for list labels")
    table_header: StyleString = Field(sgr(32, 1), description="Table column headers")
    error_accent: StyleString = Field(sgr(36, 1), description="Accent within error records")
    error: StyleString = Field(sgr(31, 1), description="Error messages")
    warning: StyleString = Field(sgr(33, 1), description="Warning messages")
    verbose: StyleString = Field(sgr(33, 1), description="Verbose messages")
    debug: StyleString = Field(sgr(33, 1), description="Debug messages")

    @field_validator('*')
    @classmethod
    def validate_style(cls, v, info: ValidationInfo):
        """Reject values that render text"""
        return validate_no_content(v, info.field_name)


class ProgressConfiguration(BaseModel):
    """Progress bar rendering configuration"""

    model_config = ConfigDict(validate_assignment=True)

    style: StyleString = Field(sgr(33, 1), description="Bar style")
    # Below this the bar's fixed decorations leave no room to render.
    max_width: int = Field(120, description="Maximum bar width in columns")
    view: ProgressView = ProgressView.MINIMAL
    use_osc_indicator: bool = Field(
        False, description="Also report progress with the OSC 'ESC ]9;4;' terminal indicator"
    )

    @field_validator('style')
    @classmethod
    def validate_style(cls, v, info: ValidationInfo):
        """Reject values that render text"""
        return validate_no_content(v, info.field_name)

    @field_validator('max_width')
    @classmethod
    def validate_max_width(cls, v):
        """Enforce the minimum renderable width"""
        if v < MIN_PROGRESS_WIDTH:
            raise StyleRangeError('max_width', v, MIN_PROGRESS_WIDTH)
        return v


class FileInfoFormatting(BaseModel):
    """Decorations for file system listings"""

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    directory: StyleString = sgr(44, 1)
    symbolic_link: StyleString = sgr(36, 1)
    executable: StyleString = sgr(32, 1)

    # Mutated in place through its own methods, never replaced
    extension: ExtensionDecorationMap = Field(default_factory=ExtensionDecorationMap, frozen=True)

    @field_validator('directory', 'symbolic_link', 'executable')
    @classmethod
    def validate_style(cls, v, info: ValidationInfo):
        """Reject values that render text"""
        return validate_no_content(v, info.field_name)
