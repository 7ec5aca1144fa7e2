"""
Shared CLI Option Decorators

Reusable Click decorators for options shared by subcommands.
"""

import click


def config_option(help=None):
    """Decorator for configuration file options."""
    def decorator(f):
        return click.option(
            '--config', '-c',
            'config_path',
            default=None,
            envvar='PROOFREAD_CONFIG',
            type=click.Path(dir_okay=False),
            help=help or 'Path to configuration file (env: PROOFREAD_CONFIG)'
        )(f)
    return decorator


def resource_option(help=None):
    """Decorator for bundled configuration resource options."""
    def decorator(f):
        return click.option(
            '--resource', '-r',
            default=None,
            help=help or 'Name of a bundled configuration (e.g. default-en.yaml)'
        )(f)
    return decorator


def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default='WARNING',
            envvar='PROOFREAD_LOG_LEVEL',
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or 'Logging level (env: PROOFREAD_LOG_LEVEL)'
        )(f)
    return decorator
