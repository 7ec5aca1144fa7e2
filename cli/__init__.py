"""
CLI Package for proofread

Modular CLI built from Click groups and subcommands. Each subcommand lives in
its own module. main() is the Click group; cli() is the console script entry
point declared in setup.py.
"""

import os
import click
from dotenv import load_dotenv

from proofread import VERSION

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')
from .check import check
from .validators import validators


@click.group()
@click.version_option(version=VERSION, prog_name='proofread')
def main():
    """proofread - check documents against configurable writing rules."""
    pass

# Register subcommands
main.add_command(check)
main.add_command(validators)

# Entry point for setup.py console script
def cli():
    """Console script entry point."""
    main()
