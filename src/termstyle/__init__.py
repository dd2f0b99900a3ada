"""termstyle - Terminal rendering settings for command-line hosts."""

__version__ = "0.1.0"
__author__ = "termstyle Team"

from .style_engine import (
    StyleRegistry,
    get_style,
    OutputRendering,
    ProgressView,
    StyleError,
)

__all__ = ["StyleRegistry", "get_style", "OutputRendering", "ProgressView", "StyleError", "__version__"]
