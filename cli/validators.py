"""
Validators Subcommand Module

Lists the validators that can be named in a configuration file.
"""

import click

from proofread.validator import ValidatorFactory


@click.command(help="List the available validators")
def validators():
    """List the names of all registered validators."""
    for name in ValidatorFactory.get_registered_names():
        click.echo(name)
