"""Tests for output formatters."""

import io
import json

from rich.console import Console

from config import PLAIN_HEADER, build_display_config
from formatters import (
    JSONLFormatter,
    PlainFormatter,
    TerminalFormatter,
    get_formatter,
    resolve_output_format,
)
from report import build_rows


class TestPlainFormatter:
    """Tests for PlainFormatter."""

    def test_classic_layout(self, snapshot):
        rows = build_rows(snapshot, build_display_config(show_total=True))
        content = PlainFormatter().format_report(rows)
        lines = content.splitlines()

        assert lines[0] == PLAIN_HEADER
        assert lines[1] == "Mem: %15s %11s %11s %13s %12s" % (8388608, 2097152, 6291456, 524288, 67108864)
        assert lines[2] == "Swap: %14s %11s %11s" % (2097152, 2097152, 0)
        assert lines[3] == "Total: %13s %11s %11s" % (10485760, 4194304, 6291456)
        assert content.endswith("\n")

    def test_columns_line_up_with_header(self, snapshot):
        """The first value of every row should end under 'total'."""
        rows = build_rows(snapshot, build_display_config(human=True, show_total=True))
        lines = PlainFormatter().format_report(rows).splitlines()

        total_end = PLAIN_HEADER.index('total') + len('total')
        for line, row in zip(lines[1:], rows):
            first = str(row.values[0])
            assert line.index(first) + len(first) == total_end

    def test_unavailable_placeholder(self, partial_snapshot):
        rows = build_rows(partial_snapshot, build_display_config(human=True))
        mem_line = PlainFormatter().format_report(rows).splitlines()[1]
        assert mem_line.split() == ['Mem:', '8.0Gi', '-', '-', '512.0Mi', '-']

    def test_writes_to_output_file(self, snapshot):
        output = io.StringIO()
        rows = build_rows(snapshot, build_display_config())
        content = PlainFormatter().format_report(rows, output_file=output)
        assert output.getvalue() == content

    def test_cycle_separator_is_blank_line(self):
        output = io.StringIO()
        PlainFormatter().format_cycle_separator(output)
        assert output.getvalue() == "\n"


class TestJSONLFormatter:
    """Tests for JSONLFormatter."""

    def test_one_record_per_row(self, snapshot):
        rows = build_rows(snapshot, build_display_config(unit_name='gibi', show_total=True))
        content = JSONLFormatter().format_report(rows, cycle=2)
        records = [json.loads(line) for line in content.splitlines()]

        assert [r['row'] for r in records] == ['Mem', 'Swap', 'Total']
        assert all(r['cycle'] == 2 for r in records)
        assert records[0]['total'] == 8
        assert records[0]['shared'] == 64
        assert 'buffer' not in records[1]
        assert records[2]['free'] == 4

    def test_human_values_are_strings(self, snapshot):
        rows = build_rows(snapshot, build_display_config(human=True))
        record = json.loads(JSONLFormatter().format_report(rows).splitlines()[0])
        assert record['total'] == "8.0Gi"

    def test_unavailable_is_null(self, partial_snapshot):
        rows = build_rows(partial_snapshot, build_display_config())
        record = json.loads(JSONLFormatter().format_report(rows).splitlines()[0])
        assert record['free'] is None
        assert record['shared'] is None

    def test_no_cycle_separator(self):
        output = io.StringIO()
        JSONLFormatter().format_cycle_separator(output)
        assert output.getvalue() == ""


class TestTerminalFormatter:
    """Tests for TerminalFormatter."""

    def test_renders_table(self, snapshot):
        buffer = io.StringIO()
        formatter = TerminalFormatter(Console(file=buffer, width=120))
        rows = build_rows(snapshot, build_display_config(human=True, show_total=True))

        assert formatter.format_report(rows) is None

        rendered = buffer.getvalue()
        for text in ('total', 'shared', 'Mem:', 'Swap:', 'Total:', '8.0Gi', '512.0Mi', '10.0Gi'):
            assert text in rendered

    def test_unavailable_placeholder(self, partial_snapshot):
        buffer = io.StringIO()
        formatter = TerminalFormatter(Console(file=buffer, width=120))
        formatter.format_report(build_rows(partial_snapshot, build_display_config(human=True)))
        assert ' - ' in buffer.getvalue()


class TestFormatterSelection:
    """Tests for get_formatter and resolve_output_format."""

    def test_get_formatter(self):
        assert isinstance(get_formatter('plain'), PlainFormatter)
        assert isinstance(get_formatter('jsonl'), JSONLFormatter)
        assert isinstance(get_formatter('terminal', Console(file=io.StringIO())), TerminalFormatter)

    def test_explicit_format_kept(self):
        assert resolve_output_format('jsonl') == 'jsonl'
        assert resolve_output_format('terminal') == 'terminal'

    def test_auto_is_plain_when_piped(self, monkeypatch):
        monkeypatch.setattr('sys.stdout', io.StringIO())
        assert resolve_output_format('auto') == 'plain'
