"""JSONL output formatter for memory reports."""

import json
from datetime import datetime
from typing import List, TextIO, Optional

try:
    from .base import BaseFormatter
except ImportError:
    from formatters.base import BaseFormatter


class JSONLFormatter(BaseFormatter):
    """Formats each report row as one JSON record.

    Unavailable figures are null; human mode values are strings and
    fixed-unit values are integers.
    """

    def format_report(
        self,
        rows: List,
        cycle: int = 1,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format one cycle as JSONL records."""
        timestamp = datetime.now().isoformat()
        lines = []

        for row in rows:
            record = {
                "cycle": cycle,
                "row": row.label.rstrip(':'),
                "timestamp": timestamp,
            }
            record.update(row.as_dict())
            lines.append(json.dumps(record))

        jsonl_content = '\n'.join(lines) + '\n'

        if output_file:
            output_file.write(jsonl_content)

        return jsonl_content

    def format_cycle_separator(self, output_file: Optional[TextIO] = None) -> Optional[str]:
        """Records are self-delimiting, so cycles need no separator."""
        return ""
