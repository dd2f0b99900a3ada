"""Command-line interface package for termstyle."""

__all__ = ["main"]


def main(*args, **kwargs):
    """Entry point that defers heavy imports until needed."""
    from .style_cmds import main as style_main

    return style_main(*args, **kwargs)
