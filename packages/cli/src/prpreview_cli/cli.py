"""CLI entry point for prpreview.

Commands:
  comment  - post or update the preview deploy comment on a pull request
"""

from __future__ import annotations

import importlib.metadata
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from prpreview_cli.commands.comment import comment_cmd


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(
    version=importlib.metadata.version("prpreview"),
    prog_name="prpreview",
)
@click.option(
    "--config",
    "config_path",
    default=".prpreview.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="PRPREVIEW_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Comment preview deploy URLs and changed pages on GitHub pull requests."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


main.add_command(comment_cmd)
