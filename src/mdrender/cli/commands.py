"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdrender.config import Settings, load_config
from mdrender.core.pipeline import render_file, run_build


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _flag_overrides(no_math: bool, no_chemistry: bool, no_highlight: bool, standalone: bool) -> dict:
    """Map opt-out flags to overrides; unset flags defer to config and env."""
    return {
        "enable_math": False if no_math else None,
        "enable_chemistry": False if no_chemistry else None,
        "enable_highlight": False if no_highlight else None,
        "standalone": True if standalone else None,
    }


NoMath = Annotated[bool, typer.Option("--no-math", help="Emit math source as data instead of typesetting")]
NoChemistry = Annotated[bool, typer.Option("--no-chemistry", help="Reject chemistry commands inside math")]
NoHighlight = Annotated[bool, typer.Option("--no-highlight", help="Disable code syntax highlighting")]
Standalone = Annotated[bool, typer.Option("--standalone", help="Wrap output in a full HTML document")]


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to render")],
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Write HTML here instead of stdout")] = None,
    no_math: NoMath = False,
    no_chemistry: NoChemistry = False,
    no_highlight: NoHighlight = False,
    standalone: Standalone = False,
    ):
    """Render a single markdown file to HTML."""
    settings = _settings(overrides=_flag_overrides(no_math, no_chemistry, no_highlight, standalone))
    source = Path(path)
    if not source.is_file():
        _fail(f"File not found: {path}")

    try:
        html = render_file(source, settings.parse_options(), settings.standalone)
    except ValueError as e:
        _fail(f"Failed to render {path}", e)

    if out:
        Path(out).parent.mkdir(parents=True, exist_ok=True)
        Path(out).write_text(html, encoding="utf-8")
        typer.echo(f"  {source} -> {out}")
    else:
        typer.echo(html)


def build_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    no_math: NoMath = False,
    no_chemistry: NoChemistry = False,
    no_highlight: NoHighlight = False,
    standalone: Standalone = False,
    ):
    """Render every .md/.mdx file under a path into the output directory."""
    overrides = _flag_overrides(no_math, no_chemistry, no_highlight, standalone)
    overrides["output_dir"] = out
    settings = _settings(overrides=overrides)
    output_dir = Path(settings.output_dir)

    try:
        results = run_build(path, output_dir, settings.parse_options(), settings.standalone)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No markdown files found under {path}.")
        raise typer.Exit(1)

    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")
