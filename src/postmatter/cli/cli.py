"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from postmatter.cli.commands import check_cmd, init_cmd, show_cmd


app = typer.Typer(name="postmatter", no_args_is_help=True, help="Front-matter post parser and validator")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="check")(check_cmd)
app.command(name="show")(show_cmd)
app.command(name="init")(init_cmd)
