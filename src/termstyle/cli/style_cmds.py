"""Style inspection CLI commands.

This module provides commands for inspecting the style registry: listing
sequences with rendered samples, encoding RGB colors, checking candidate
style strings, building hyperlinks, and exporting settings.
"""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, Tuple

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..config import configure_style, export_settings
from ..style_engine import StyleError, StyleRegistry, get_style, hex_to_rgb, validate_no_content
from ..style_engine.utils import escape_sequence, unescape_sequence

console = Console()

SECTIONS = ("all", "decorations", "colors", "formatting", "progress", "file-info")


def _registry(ctx: click.Context) -> StyleRegistry:
    return ctx.obj['registry']


def _fail(message: str, error: Exception) -> None:
    console.print(f"[red]Error {message}: {escape(str(error))}[/red]")
    sys.exit(1)


def _sample(sequence: str, reset: str, label: str = "Sample") -> Text:
    return Text.from_ansi(f"{sequence}{label}{reset}")


def _style_table(title: str, rows: Iterable[Tuple[str, str]], reset: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold")

    table.add_column("Name", style="cyan", min_width=18)
    table.add_column("Sequence", style="dim")
    table.add_column("Sample")

    for name, sequence in rows:
        table.add_row(name, Text(escape_sequence(sequence)), _sample(sequence, reset))

    return table


@click.group()
@click.option("--config", type=click.Path(dir_okay=False, path_type=Path),
              help="YAML style settings to apply (defaults to $TERMSTYLE_CONFIG)")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config: Optional[Path], verbose: bool):
    """Inspect terminal style settings."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )

    ctx.ensure_object(dict)
    registry = ctx.obj.get('registry')
    if registry is None:
        registry = get_style()

    try:
        ctx.obj['registry'] = configure_style(config, registry=registry)
    except (StyleError, ValueError, FileNotFoundError) as e:
        _fail("loading style settings", e)


@main.command()
@click.option("--section", "-s", type=click.Choice(SECTIONS), default="all",
              help="Only show one group of settings")
@click.pass_context
def show(ctx, section: str):
    """Show style settings with rendered samples."""
    registry = _registry(ctx)
    reset = registry.reset
    tables = []

    if section in ("all", "decorations"):
        tables.append(_style_table("Decorations", registry.fixed_sequences().items(), reset))

    if section in ("all", "colors"):
        for title, palette in (("Foreground", registry.foreground), ("Background", registry.background)):
            rows = [(name, getattr(palette, name)) for name in palette.names()]
            tables.append(_style_table(title, rows, reset))

    if section in ("all", "formatting"):
        rows = registry.formatting.model_dump().items()
        tables.append(_style_table("Formatting", rows, reset))

    if section in ("all", "progress"):
        progress = registry.progress
        tables.append(_style_table("Progress", [("style", progress.style)], reset))
        console.print(
            f"max_width: [bold]{progress.max_width}[/bold]  "
            f"view: [bold]{progress.view.value}[/bold]  "
            f"use_osc_indicator: [bold]{progress.use_osc_indicator}[/bold]"
        )

    if section in ("all", "file-info"):
        file_info = registry.file_info
        rows = [
            ("directory", file_info.directory),
            ("symbolic_link", file_info.symbolic_link),
            ("executable", file_info.executable),
        ]
        tables.append(_style_table("File Info", rows, reset))
        tables.append(_style_table("Extensions", file_info.extension.items(), reset))

    console.print(f"Output rendering: [bold]{registry.output_rendering.value}[/bold]")
    for table in tables:
        console.print()
        console.print(table)


def _parse_color(values: Tuple[str, ...]) -> Tuple[int, ...]:
    if len(values) == 3:
        return tuple(int(value, 0) for value in values)
    if len(values) == 1:
        value = values[0]
        if value.startswith("#"):
            return hex_to_rgb(value)
        return (int(value, 0),)
    raise ValueError("Expected R G B, a packed integer, or #RRGGBB")


@main.command()
@click.argument("color", nargs=-1, required=True)
@click.option("--background", "-b", is_flag=True, help="Encode a background color")
@click.option("--sample", is_flag=True, help="Also print a rendered sample")
@click.pass_context
def rgb(ctx, color: Tuple[str, ...], background: bool, sample: bool):
    """Encode a 24-bit color as a control sequence.

    COLOR is either three components (``255 0 0``), a packed integer
    (``0xFF0000``), or a hex string (``#FF0000``).
    """
    registry = _registry(ctx)
    palette = registry.background if background else registry.foreground

    try:
        sequence = palette.from_rgb(*_parse_color(color))
    except ValueError as e:
        _fail(f"parsing color {' '.join(color)!r}", e)

    click.echo(escape_sequence(sequence))
    if sample:
        console.print(_sample(sequence, registry.reset))


@main.command()
@click.argument("value")
def check(value: str):
    r"""Check whether VALUE is a valid style string.

    Backslash escapes are interpreted, so ``'\e[31m'`` and ``'\x1b[31m'``
    both mean ESC [31m.
    """
    try:
        validate_no_content(unescape_sequence(value))
    except (StyleError, ValueError) as e:
        _fail("validating style", e)

    console.print(f"[green]Valid style string:[/green] {escape(value)}")


@main.command()
@click.argument("text")
@click.argument("uri")
@click.pass_context
def link(ctx, text: str, uri: str):
    """Print TEXT as a terminal hyperlink to URI."""
    click.echo(_registry(ctx).format_hyperlink(text, uri))


@main.command()
@click.pass_context
def export(ctx):
    """Print the current settings as YAML."""
    click.echo(export_settings(_registry(ctx)).to_yaml(), nl=False)


if __name__ == "__main__":
    main()
