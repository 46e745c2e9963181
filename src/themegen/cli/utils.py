"""
themegen CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import os
import platform
from pathlib import Path

import typer

from themegen._version import get_version
from themegen.core.errors import ConfigError
from themegen.core.manifest import (
    ThemegenManifest,
    default_manifest,
    find_manifest,
    load_manifest,
)

LOG_LEVEL_ENV = "THEMEGEN_LOG_LEVEL"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"themegen version {get_version()}")
        python = f"{platform.python_implementation()} {platform.python_version()}"
        typer.echo(f"  Python:        {python}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from --verbose or THEMEGEN_LOG_LEVEL."""
    level_name = "DEBUG" if verbose else os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def resolve_manifest(config: Path | None) -> ThemegenManifest:
    """
    Load the manifest named on the command line, themegen.toml in the
    current directory, or fall back to the built-in preset.

    Raises:
        ConfigError: If an explicitly named manifest does not exist or is invalid.
    """
    if config is not None:
        if not config.exists():
            raise ConfigError(f"Manifest not found: {config}")
        return load_manifest(config)

    found = find_manifest(Path.cwd())
    if found is not None:
        return load_manifest(found)
    return default_manifest()
