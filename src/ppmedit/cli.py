"""ppmedit CLI — Typer-based entry point.

Commands
--------
edit        Apply invert / grayscale / emboss / motionblur to a P3 file.
tokens      Dump the lexed token stream of a P3 file.
info        Show the header of a P3 file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ppmedit.ppm.errors import PPMError, UsageError

app = typer.Typer(
    name="ppmedit",
    help="ppmedit — edit plain-text (P3) PPM images",
    add_completion=False,
)

USAGE = "USAGE: ppmedit edit IN-FILE OUT-FILE (grayscale|invert|emboss|motionblur MOTION-BLUR-LENGTH)"


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )


def _fail(exc: Exception, code: int = 1) -> typer.Exit:
    typer.echo(str(exc), err=True)
    return typer.Exit(code)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def edit(
    input_path: Path = typer.Argument(..., metavar="IN-FILE", help="P3 image to read."),
    output_path: Path = typer.Argument(..., metavar="OUT-FILE", help="Where to write the result."),
    operation: str = typer.Argument(..., help="invert, grayscale, emboss or motionblur."),
    length: Optional[int] = typer.Argument(None, help="Blur length (motionblur only)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Apply one pixel transformation and write the edited image."""
    _setup_logging(verbose)
    from ppmedit.editor import edit_file
    from ppmedit.ppm.transforms import validate_operation

    try:
        validate_operation(operation, length)
    except UsageError as exc:
        typer.echo(f"{exc}\n{USAGE}", err=True)
        raise typer.Exit(2)

    try:
        status = edit_file(input_path, output_path, operation, length)
    except (PPMError, OSError) as exc:
        raise _fail(exc)
    typer.echo(status)


@app.command()
def tokens(
    path: Path = typer.Argument(..., help="P3 image to tokenize."),
    plain: bool = typer.Option(False, "--plain", help="One (value,KIND) entry per line instead of a table."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Dump the token stream of a P3 file."""
    _setup_logging(verbose)
    from ppmedit.config.settings import get_settings
    from ppmedit.ppm.lexer import dump_tokens, lex_file

    try:
        toks = lex_file(path, encoding=get_settings().parser.encoding)
    except (PPMError, OSError) as exc:
        raise _fail(exc)

    if plain:
        typer.echo(dump_tokens(toks), nl=False)
        return

    table = Table(title=f"{path} ({len(toks)} tokens)")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Value", justify="right")
    table.add_column("Line", justify="right")
    table.add_column("Column", justify="right")
    for i, tok in enumerate(toks):
        value = str(tok.value) if tok.is_number else ""
        table.add_row(str(i), tok.kind.value, value, str(tok.line), str(tok.column))
    Console().print(table)


@app.command()
def info(
    path: Path = typer.Argument(..., help="P3 image to inspect."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Parse a P3 file and show its header."""
    _setup_logging(verbose)
    from ppmedit.editor import load_image

    try:
        image = load_image(path)
    except (PPMError, OSError) as exc:
        raise _fail(exc)

    typer.echo(f"{path}: {image.width}x{image.height}, max color {image.max_color_value}, "
               f"{image.width * image.height} pixels")


def main() -> int:
    """Entry point for the ``ppmedit`` console script."""
    app()
    return 0
