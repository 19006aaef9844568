# -*- coding: utf-8 -*-

import click

from port_provider import __version__
from port_provider.cli.commands.main import cli_start, console


@cli_start.command()
@click.option(
    "-s",
    "--short",
    "short",
    default=False,
    is_flag=True,
    required=False,
    help="Display only the short version number.",
)
def version(short: bool) -> None:
    """
    Displays the version of the provider.
    """
    if short:
        console.print(__version__)
    else:
        console.print(f"Port provider version: {__version__}")
