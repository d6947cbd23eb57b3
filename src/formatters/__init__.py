"""Output formatters for different display modes."""

from .base import BaseFormatter
from .terminal import TerminalFormatter
from .plain import PlainFormatter, should_use_plain_output
from .jsonl import JSONLFormatter

__all__ = [
    'BaseFormatter',
    'TerminalFormatter',
    'PlainFormatter',
    'JSONLFormatter',
    'get_formatter',
    'should_use_plain_output',
    'resolve_output_format',
]


def get_formatter(output_format: str, console=None) -> BaseFormatter:
    """Return the formatter for an output format name."""
    if output_format == 'terminal':
        return TerminalFormatter(console)
    if output_format == 'jsonl':
        return JSONLFormatter()
    return PlainFormatter()


def resolve_output_format(output_format: str) -> str:
    """Resolve 'auto' to terminal on an interactive terminal, plain otherwise."""
    if output_format != 'auto':
        return output_format
    return 'plain' if should_use_plain_output() else 'terminal'
