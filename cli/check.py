"""
Check Subcommand Module

Parses input files, runs the configured validators over them and prints the
errors found. Exits with 1 when more errors than --limit were found and with
2 when the configuration or an input file cannot be loaded.
"""

import json
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

import click

from proofread.engine import ValidationEngine
from proofread.errors import ConfigurationError, ParseError
from proofread.parser import available_parsers, get_parser, parser_for_extension
from proofread.report import DocumentReport
from proofread.utils.logging_config import configure_logging, logging_config

from .shared_options import config_option, log_level_option, resource_option


logger = logging.getLogger(__name__)

DEFAULT_RESOURCE = "default-en.yaml"


@click.command(help="Check text files against the configured validators")
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@config_option()
@resource_option()
@click.option(
    "--parser", "-p",
    "parser_name",
    type=click.Choice(available_parsers(), case_sensitive=False),
    default=None,
    help="Input format (default: from file extension, plain otherwise)",
)
@click.option(
    "--output-format", "-f",
    type=click.Choice(["human", "plain", "json"], case_sensitive=False),
    default="human",
    help="Report format (default: human)",
)
@click.option(
    "--limit", "-l",
    type=click.IntRange(min=0),
    default=0,
    help="Maximum number of errors tolerated before failing (default: 0)",
)
@log_level_option()
def check(
    files: Tuple[str, ...],
    config_path: Optional[str],
    resource: Optional[str],
    parser_name: Optional[str],
    output_format: str,
    limit: int,
    log_level: str,
):
    """Check text files against the configured validators.

    Examples:
        # Check a Markdown file with the default English rules
        proofread check README.md

        # Use a custom configuration and emit JSON
        proofread check --config proofread.yaml --output-format json docs/*.md

        # Tolerate up to 5 errors
        proofread check --limit 5 notes.txt
    """
    configure_logging(level=log_level.lower())

    try:
        engine = _build_engine(config_path, resource)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    logging_config.log_configuration_details(engine.configuration.to_dict())

    try:
        documents = [
            engine.parse(_parser_for(path, parser_name), Path(path))
            for path in files
        ]
    except ParseError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    start = time.time()
    results = engine.validate_all(documents)
    elapsed = time.time() - start
    logging_config.log_operation_timing("Validation", elapsed)

    reports = DocumentReport.from_results(results, duration_ms=int(elapsed * 1000))
    _print_reports(reports, output_format)

    error_count = sum(report.error_count for report in reports)
    if error_count > limit:
        sys.exit(1)


def _build_engine(config_path: Optional[str], resource: Optional[str]) -> ValidationEngine:
    if config_path and resource:
        raise ConfigurationError("Use either --config or --resource, not both")
    if config_path:
        return ValidationEngine.from_file(config_path)
    return ValidationEngine.from_resource(resource or DEFAULT_RESOURCE)


def _parser_for(path: str, parser_name: Optional[str]):
    if parser_name:
        return get_parser(parser_name)
    return parser_for_extension(Path(path).suffix)


def _print_reports(reports: List[DocumentReport], output_format: str) -> None:
    output_format = output_format.lower()

    if output_format == "json":
        click.echo(json.dumps(
            {
                "total": len(reports),
                "errors": sum(r.error_count for r in reports),
                "reports": [r.to_dict() for r in reports],
            },
            indent=2,
            ensure_ascii=False,
        ))
        return

    if output_format == "plain":
        for report in reports:
            for line in report.format_plain():
                click.echo(line)
        return

    for report in reports:
        click.echo(report.format_human())

    errors = sum(r.error_count for r in reports)
    warnings = sum(r.warning_count for r in reports)
    click.echo(f"\n  {len(reports)} file(s) checked, {errors} error(s), {warnings} warning(s)")
