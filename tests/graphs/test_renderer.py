"""
Tests for the graph entry points and mode registry.
"""

import pytest
from glyphplot.graphs import GRAPH_GENERATORS, render
from glyphplot.graphs.renderer import create_bar_graph, create_line_graph, draw_line_graph
from glyphplot.graphs.types import GraphOptions

ALL_MODES = ("line", "bar", "legacy")


class TestBarGraph:
    def test_five_bars(self):
        graph = create_bar_graph(
            [10, 20, 30, 15, 25],
            {"height": 10, "width": 40, "padding": "  ", "format": lambda x: f"${x:.0f}".rjust(4)},
        )

        lines = graph.split("\n")
        assert len(lines) == 11
        assert "█" in graph
        assert "┼" in graph
        assert "┤" in graph

    def test_axis_labels_on_step_rows(self):
        graph = create_bar_graph([10, 20, 30, 15, 25], GraphOptions(width=40, height=10))
        lines = graph.split("\n")

        assert lines[0].startswith("$40 ┼")
        assert lines[1].startswith("    ┤")
        assert lines[5].startswith("$20 ┼")
        assert lines[10].startswith(" $0 ┼")
        assert lines[7] == "    ┤   $10   █████  █████  █████  █████     "

    def test_single_point(self):
        graph = create_bar_graph([50], GraphOptions(width=5, height=10, padding="  "))
        assert graph == "  $50 ┼────█"

    def test_all_zero_series(self):
        graph = create_bar_graph([0, 0], GraphOptions(width=10, height=4))
        lines = graph.split("\n")
        assert len(lines) == 5
        assert lines[0].startswith("$20 ┼")
        assert "█" not in graph

    def test_missing_values_skipped(self):
        graph = create_bar_graph([10, None, float("nan"), 30], GraphOptions(width=40, height=10))
        assert len(graph.split("\n")) == 11
        assert "$30" in graph


class TestLineGraph:
    def test_exact_grid(self):
        graph = create_line_graph([0, 20, 40], GraphOptions(width=5, height=4))
        assert graph.split("\n") == [
            "$40 ┼    ●",
            "    ┤   · ",
            "$20 ┼  ●  ",
            "    ┤ ·   ",
            " $0 ┼●    ",
        ]

    def test_single_point(self):
        assert create_line_graph([50], {"width": 5, "height": 3}) == "$50 ┼────●"

    def test_missing_single_point(self):
        assert create_line_graph([None], {"width": 5, "height": 3}) == ""

    def test_markers_on_top_of_dots(self):
        graph = create_line_graph([40, 0, 40], GraphOptions(width=9, height=4))
        rows = [line[5:] for line in graph.split("\n")]
        assert rows[0][0] == "●"
        assert rows[4][4] == "●"
        assert rows[0][8] == "●"
        assert graph.count("●") == 3

    def test_gap_breaks_the_line(self):
        graph = create_line_graph([20, None, 20], GraphOptions(width=9, height=4))
        assert "·" not in graph
        assert graph.count("●") == 2


class TestLegacyLineGraph:
    def test_exact_grid(self):
        graph = draw_line_graph([1, 3], GraphOptions(width=3, height=2))
        assert graph.split("\n") == [
            "3.00 ┤  ╱",
            "2.00 ┤ ╱ ",
            "1.00 ┼╱  ",
        ]

    def test_flat_series_is_midpoint_rule(self):
        graph = draw_line_graph([5, 5, 5], GraphOptions(width=4, height=4))
        lines = graph.split("\n")
        assert len(lines) == 5
        assert lines[2] == "5.00 ┤────"
        assert all("─" not in line for i, line in enumerate(lines) if i != 2)

    def test_single_point(self):
        assert draw_line_graph([1.5], GraphOptions(width=3, height=2)) == "1.50 ┼───"

    def test_custom_format_and_padding(self):
        graph = draw_line_graph([0, 10], GraphOptions(width=2, height=1, padding="..", format=lambda v: f"{v:g}"))
        assert graph.split("\n") == ["..10 ┤ ╱", ".. 0 ┼╱ "]


class TestRender:
    def test_registry_has_all_modes(self):
        assert set(GRAPH_GENERATORS) == set(ALL_MODES)

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_empty_series(self, mode: str):
        assert render([], GraphOptions(width=10, height=5), mode) == ""

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_line_count(self, mode: str):
        graph = render([3, 14, 15, 9, 26, 5], GraphOptions(width=30, height=7), mode)
        assert len(graph.split("\n")) == 8

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_single_point_is_one_line(self, mode: str):
        graph = render([42], GraphOptions(width=10, height=5), mode)
        assert "\n" not in graph
        assert "42" in graph

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_idempotent(self, mode: str):
        series = [1.5, 80.25, 33, 0, 47.75, 61]
        opts = GraphOptions(width=25, height=6, padding=" ")
        assert render(series, opts, mode) == render(series, opts, mode)

    def test_negative_values_do_not_raise(self):
        for mode in ALL_MODES:
            render([-30, -5, -12], GraphOptions(width=12, height=4), mode)

    def test_negative_bars_stay_below_baseline(self):
        graph = create_bar_graph([-30, -40], GraphOptions(width=12, height=4))
        assert "█" not in graph

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Invalid graph type"):
            render([1, 2], GraphOptions(width=10, height=5), "pie")  # type: ignore[arg-type]
