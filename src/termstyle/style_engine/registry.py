"""Style registry holding the terminal rendering settings of a process.

This module provides the StyleRegistry model, which composes the fixed
control sequences, the color palettes, and the settable style groups, plus
the accessor for the process-wide instance.
"""

import logging
import threading
from typing import ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .schema import (
    BackgroundColor,
    FileInfoFormatting,
    ForegroundColor,
    FormattingData,
    OutputRendering,
    ProgressConfiguration,
    StyleString,
)
from .utils import format_hyperlink, sgr

logger = logging.getLogger(__name__)


class StyleRegistry(BaseModel):
    """Terminal rendering settings.

    Fixed sequences (``reset``, ``bold``, ...) are class constants and cannot
    be assigned. The style groups are owned by the registry and mutated in
    place; each validates its own fields. Nothing here is synchronised, so
    concurrent writers get last-writer-wins.

    Most callers should share the process-wide instance returned by
    :func:`get_style`, but a registry can also be built directly and handed
    to whatever needs it. Groups passed to the constructor are owned by the
    new registry from then on and must not be handed to another one.
    """

    model_config = ConfigDict(validate_assignment=True)

    reset: ClassVar[StyleString] = sgr(0)
    bold: ClassVar[StyleString] = sgr(1)
    bold_off: ClassVar[StyleString] = sgr(22)
    italic: ClassVar[StyleString] = sgr(3)
    italic_off: ClassVar[StyleString] = sgr(23)
    underline: ClassVar[StyleString] = sgr(4)
    underline_off: ClassVar[StyleString] = sgr(24)
    blink: ClassVar[StyleString] = sgr(5)
    blink_off: ClassVar[StyleString] = sgr(25)
    hidden: ClassVar[StyleString] = sgr(8)
    hidden_off: ClassVar[StyleString] = sgr(28)
    reverse: ClassVar[StyleString] = sgr(7)
    reverse_off: ClassVar[StyleString] = sgr(27)
    strikethrough: ClassVar[StyleString] = sgr(9)
    strikethrough_off: ClassVar[StyleString] = sgr(29)

    FIXED_SEQUENCES: ClassVar[tuple] = (
        'reset', 'bold', 'bold_off', 'italic', 'italic_off',
        'underline', 'underline_off', 'blink', 'blink_off',
        'hidden', 'hidden_off', 'reverse', 'reverse_off',
        'strikethrough', 'strikethrough_off',
    )

    output_rendering: OutputRendering = OutputRendering.AUTOMATIC

    foreground: ForegroundColor = Field(default_factory=ForegroundColor, frozen=True)
    background: BackgroundColor = Field(default_factory=BackgroundColor, frozen=True)
    formatting: FormattingData = Field(default_factory=FormattingData, frozen=True)
    progress: ProgressConfiguration = Field(default_factory=ProgressConfiguration, frozen=True)
    file_info: FileInfoFormatting = Field(default_factory=FileInfoFormatting, frozen=True)

    @classmethod
    def fixed_sequences(cls) -> Dict[str, StyleString]:
        """Get the fixed control sequences by name."""
        return {name: getattr(cls, name) for name in cls.FIXED_SEQUENCES}

    @classmethod
    def instance(cls) -> 'StyleRegistry':
        """Get the process-wide registry."""
        return get_style()

    def format_hyperlink(self, text: str, uri: str) -> str:
        """Render ``text`` as a terminal hyperlink to ``uri``."""
        return format_hyperlink(text, str(uri))


_registry: Optional[StyleRegistry] = None
_registry_lock = threading.Lock()


def get_style() -> StyleRegistry:
    """Get the process-wide style registry, creating it on first use.

    Creation happens once even when several threads race for it. The
    registry then lives for the rest of the process; there is no reset.
    """
    global _registry

    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = StyleRegistry()
                logger.debug("Style registry initialized")

    return _registry
