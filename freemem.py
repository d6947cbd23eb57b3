#!/usr/bin/env python3
"""
freemem

Display the amount of space for RAM and swap.
"""

import sys
import click
from dotenv import load_dotenv
from pathlib import Path
from rich.console import Console

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from config import (
    VERSION,
    OUTPUT_FORMATS,
    DECIMAL_UNIT_OPTIONS,
    BINARY_UNIT_OPTIONS,
    UNIT_OPTION_ALIASES,
    build_display_config,
)
from units import get_unit
from formatters import get_formatter, resolve_output_format
from runner import run_report
from cli.validation import validate_seconds, validate_count, validate_unit_choice

# Load environment variables from .env file
load_dotenv()


def _check_seconds(ctx, param, value):
    if value is None:
        return None
    is_valid, error = validate_seconds(value)
    if not is_valid:
        raise click.BadParameter(error)
    return value


def _check_count(ctx, param, value):
    if value is None:
        return None
    is_valid, error = validate_count(value)
    if not is_valid:
        raise click.BadParameter(error)
    return value


def unit_options(func):
    """Attach one --<unit> switch per fixed unit, all storing into unit_name."""
    for name in reversed(DECIMAL_UNIT_OPTIONS + BINARY_UNIT_OPTIONS):
        unit = get_unit(name)
        flags = [f'--{name}'] + [f'--{alias}' for alias in UNIT_OPTION_ALIASES.get(name, [])]
        help_text = 'show the output in bytes' if unit.exponent == 0 else f'show the output in {name}bytes'
        func = click.option(*flags, 'unit_name', flag_value=name, help=help_text)(func)
    return func


@click.command()
@unit_options
@click.option('--decimal', is_flag=True, envvar='FREEMEM_DECIMAL',
              help='Use decimal format, e.g. pow(1000, n)')
@click.option('--human', '-h', is_flag=True, envvar='FREEMEM_HUMAN',
              help='Show the output in human readable form, e.g. 2.3G')
@click.option('--total', '-t', 'show_total', is_flag=True, envvar='FREEMEM_TOTAL',
              help='Show the sum of total, free, and used RAM and swap')
@click.option('--secs', '-s', 'seconds', type=int, callback=_check_seconds,
              help='Continue printing every N seconds')
@click.option('--count', '-c', type=int, callback=_check_count,
              help='Continue printing N times and exit')
@click.option('--format', 'output_format', type=click.Choice(OUTPUT_FORMATS),
              default='plain', envvar='FREEMEM_FORMAT',
              help='Output format (auto picks terminal on an interactive terminal)')
@click.option('--output', '-o', type=click.File('w'), default='-',
              help='Output file (default: stdout)')
@click.option('--verbose', '-v', is_flag=True, help='Report figures the system could not provide')
@click.version_option(version=VERSION, prog_name='freemem')
def main(unit_name, decimal, human, show_total, seconds, count, output_format, output, verbose):
    """Display the amount of space for RAM and swap."""

    # Switches that were not given can come through as False
    unit_name = unit_name or None

    is_valid, error = validate_unit_choice(unit_name, human)
    if not is_valid:
        raise click.UsageError(error)

    config = build_display_config(
        unit_name=unit_name,
        human=human,
        decimal=decimal,
        show_total=show_total,
        seconds=seconds,
        count=count,
        output_format=resolve_output_format(output_format),
    )

    formatter = get_formatter(config.output_format, Console(file=output))

    def report_unavailable(snapshot):
        if verbose and snapshot.unavailable:
            click.echo(f"Unavailable: {', '.join(snapshot.unavailable)}", err=True)

    try:
        run_report(config, formatter, output, on_snapshot=report_unavailable)
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
