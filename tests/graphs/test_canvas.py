"""
Tests for the character grid.
"""

from glyphplot.graphs.canvas import Canvas


class TestCanvas:
    def test_starts_blank_with_baseline_row(self):
        canvas = Canvas(4, 2)
        assert canvas.rows == 3
        assert list(canvas.iter_rows()) == ["    ", "    ", "    "]

    def test_put_and_get(self):
        canvas = Canvas(4, 2)
        assert canvas.put(1, 2, "x") is True
        assert canvas.get(1, 2) == "x"
        assert canvas.row_text(2) == " x  "
        assert not canvas.is_blank(1, 2)

    def test_out_of_range_writes_are_dropped(self):
        canvas = Canvas(3, 1)
        assert canvas.put(-1, 0, "x") is False
        assert canvas.put(3, 0, "x") is False
        assert canvas.put(0, 2, "x") is False
        assert canvas.put(0, -1, "x") is False
        assert list(canvas.iter_rows()) == ["   ", "   "]

    def test_out_of_range_reads_are_blank(self):
        canvas = Canvas(3, 1)
        assert canvas.get(10, 10) == " "

    def test_baseline_row_is_addressable(self):
        canvas = Canvas(2, 3)
        assert canvas.contains(1, 3)
        assert not canvas.contains(2, 3)
