"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdtypst.cli.commands import convert_cmd


app = typer.Typer(name="mdtypst", add_completion=False, help="Markdown to Typst converter")

app.command(name="convert")(convert_cmd)
