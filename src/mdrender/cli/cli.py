"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdrender.cli.commands import build_cmd, render_cmd


app = typer.Typer(name="mdrender", no_args_is_help=True, help="Extended markdown to HTML with math and highlighting")

app.command(name="render")(render_cmd)
app.command(name="build")(build_cmd)
