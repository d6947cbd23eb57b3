"""Rich terminal output formatter for memory reports."""

from typing import List, Optional, TextIO

from rich.console import Console
from rich.table import Table
from rich import box

try:
    from .base import BaseFormatter
    from ..config import COLUMNS
except ImportError:
    from formatters.base import BaseFormatter
    from config import COLUMNS


class TerminalFormatter(BaseFormatter):
    """Formats report rows as a rich table for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

        # Color scheme
        self.colors = {
            'mem': 'bright_green',
            'swap': 'bright_yellow',
            'total': 'bright_cyan',
            'header': 'bold',
            'border': 'dim white',
            'unavailable': 'dim red',
        }

    def format_report(
        self,
        rows: List,
        cycle: int = 1,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format and display one cycle as a table."""
        table = Table(
            box=box.SIMPLE,
            border_style=self.colors['border'],
            header_style=self.colors['header'],
        )

        table.add_column("", style="bold")
        for column in COLUMNS:
            table.add_column(column, justify="right")

        for row in rows:
            cells = [self._cell(value) for value in row.values]
            # Swap and Total rows have no buffer / shared columns
            cells.extend([""] * (len(COLUMNS) - len(cells)))
            table.add_row(row.label, *cells, style=self.colors.get(row.key))

        self.console.print(table)
        return None  # Output written directly to console

    def format_cycle_separator(self, output_file: Optional[TextIO] = None) -> Optional[str]:
        self.console.print()
        return None

    def _cell(self, value) -> str:
        text = self.cell_text(value)
        if value is None:
            return f"[{self.colors['unavailable']}]{text}[/]"
        return text
