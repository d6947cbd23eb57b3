"""Tests for building report rows."""

from config import build_display_config
from report import build_rows, format_value

GIB = 1024 ** 3


class TestFormatValue:
    """Tests for format_value function."""

    def test_unit_mode(self):
        config = build_display_config(unit_name='mebi')
        assert format_value(3 * 1024 ** 2 + 5, config) == 3

    def test_human_mode(self):
        assert format_value(GIB, build_display_config(human=True)) == "1.0Gi"
        assert format_value(10 ** 9, build_display_config(human=True, decimal=True)) == "1.0G"

    def test_unavailable_bypasses_formatting(self):
        assert format_value(None, build_display_config()) is None
        assert format_value(None, build_display_config(human=True)) is None

    def test_zero(self):
        assert format_value(0, build_display_config(human=True)) == "0B"
        assert format_value(0, build_display_config()) == 0


class TestBuildRows:
    """Tests for build_rows function."""

    def test_default_kibibytes(self, snapshot):
        mem, swap = build_rows(snapshot, build_display_config())
        assert mem.label == 'Mem:'
        assert mem.values == [8388608, 2097152, 6291456, 524288, 67108864]
        assert swap.label == 'Swap:'
        assert swap.values == [2097152, 2097152, 0]

    def test_human_binary(self, snapshot):
        mem, swap = build_rows(snapshot, build_display_config(human=True))
        assert mem.values == ["8.0Gi", "2.0Gi", "6.0Gi", "512.0Mi", "64.0Gi"]
        assert swap.values == ["2.0Gi", "2.0Gi", "0B"]

    def test_human_decimal(self, snapshot):
        mem, _ = build_rows(snapshot, build_display_config(human=True, decimal=True))
        assert mem.values[0] == "8.6G"

    def test_no_total_row_by_default(self, snapshot):
        rows = build_rows(snapshot, build_display_config())
        assert [row.key for row in rows] == ['mem', 'swap']

    def test_total_row(self, snapshot):
        rows = build_rows(snapshot, build_display_config(human=True, show_total=True))
        total = rows[-1]
        assert total.label == 'Total:'
        assert total.values == ["10.0Gi", "4.0Gi", "6.0Gi"]

    def test_total_row_in_fixed_unit(self, snapshot):
        rows = build_rows(snapshot, build_display_config(unit_name='gibi', show_total=True))
        assert rows[-1].values == [10, 4, 6]

    def test_unavailable_figures(self, partial_snapshot):
        rows = build_rows(partial_snapshot, build_display_config(show_total=True))
        mem, swap, total = rows
        assert mem.values[1] is None
        assert mem.values[2] is None
        assert mem.values[4] is None
        assert swap.values == [2097152, 1048576, 1048576]
        assert total.values == [10485760, None, None]

    def test_as_dict_maps_columns(self, snapshot):
        mem, swap = build_rows(snapshot, build_display_config(unit_name='gibi'))
        assert mem.as_dict() == {'total': 8, 'free': 2, 'used': 6, 'buffer': 0, 'shared': 64}
        assert swap.as_dict() == {'total': 2, 'free': 2, 'used': 0}
