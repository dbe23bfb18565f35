import logging
import sys

from glyphplot.cli._io import load_series
from glyphplot.cli._summary import render_summary
from glyphplot.cli.exitcodes import EXIT_OK
from glyphplot.core.config import load_config
from glyphplot.graphs import GRAPH_GENERATORS, format_date_label, layout_x_axis

LOGGER = logging.getLogger(__name__)


def run(
    *,
    input: str | None = None,
    graph: str | None = None,
    width: int | None = None,
    height: int | None = None,
    padding: str | None = None,
    config: str | None = None,
    axis: bool = True,
    summary: bool = True,
) -> int:
    """
    Plot a series read from a file or stdin.

    Args:
        input: Data file path (None or '-' reads stdin)
        graph: Graph type (line, bar or legacy); overrides the config file
        width: Graph width in columns
        height: Graph height in rows, excluding the baseline
        padding: Prefix for every graph line
        config: Explicit config file (default: glyphplot.yaml in cwd, if any)
        axis: Print x-axis labels under the graph
        summary: Print max/min/avg/total under the graph
    """
    cfg = load_config(config).with_overrides(graph=graph, width=width, height=height, padding=padding)
    data = load_series(input)
    LOGGER.debug("Loaded %d entries, graph=%s", len(data.values), cfg.graph)

    if not data.values:
        print("No data to display.", file=sys.stderr)
        return EXIT_OK

    if cfg.graph == "line" and len(data.values) < 2:
        print("Cannot draw a line graph with less than 2 data points.", file=sys.stderr)
        return EXIT_OK

    options = cfg.graph_options()
    chart = GRAPH_GENERATORS[cfg.graph](data.values, options)
    print(chart)

    if axis and len(data.values) > 1:
        # Graph cells are the last `width` characters of every line.
        margin = len(chart.split("\n", 1)[0]) - options.width
        labels = [format_date_label(label) for label in data.labels]
        print(layout_x_axis(labels, options.width, margin))

    if summary:
        text = render_summary(data.values, currency=cfg.currency)
        if text:
            print()
            print(text)

    return EXIT_OK
