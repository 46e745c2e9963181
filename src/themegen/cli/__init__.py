"""
themegen CLI package.

- build.py: build and inspect commands
- utils.py: version, logging and manifest helpers
"""

import typer

from themegen.cli.build import build_command, inspect_command
from themegen.cli.utils import version_callback

app = typer.Typer(
    help="themegen - design token JSON to CSS custom properties",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """themegen CLI main callback for global options."""
    pass


app.command(name="build")(build_command)
app.command(name="inspect")(inspect_command)


def main() -> None:
    app()


__all__ = ["app", "main", "version_callback"]
