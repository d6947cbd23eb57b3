"""Plain text table formatter, the classic free(1) layout."""

from typing import List, TextIO, Optional

try:
    from .base import BaseFormatter
    from ..config import PLAIN_HEADER, PLAIN_ROW_WIDTHS
except ImportError:
    from formatters.base import BaseFormatter
    from config import PLAIN_HEADER, PLAIN_ROW_WIDTHS


class PlainFormatter(BaseFormatter):
    """Formats report rows as fixed-width columns suitable for piping."""

    def format_report(
        self,
        rows: List,
        cycle: int = 1,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format one cycle as a header line and one line per row."""
        lines = [PLAIN_HEADER]
        for row in rows:
            lines.append(self._format_row(row))

        plain_content = '\n'.join(lines) + '\n'

        if output_file:
            output_file.write(plain_content)

        return plain_content

    def _format_row(self, row) -> str:
        widths = PLAIN_ROW_WIDTHS[row.key]
        cells = [
            f"{self.cell_text(value):>{width}}"
            for value, width in zip(row.values, widths)
        ]
        return f"{row.label} " + ' '.join(cells)


def should_use_plain_output() -> bool:
    """Detect if output should be plain text (when piping or NO_COLOR is set)."""
    import os
    import sys

    # Check if output is being piped (not a terminal)
    if not sys.stdout.isatty():
        return True

    # Check for NO_COLOR environment variable
    if os.getenv('NO_COLOR'):
        return True

    return False
