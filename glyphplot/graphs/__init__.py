# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Glyphplot Contributors
#
# This file is part of Glyphplot.
#
# Glyphplot is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Glyphplot is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from collections.abc import Callable, Mapping
from typing import Any, Literal

from glyphplot.graphs.axis import Tick, YAxis, format_date_label, layout_x_axis, select_label_indices
from glyphplot.graphs.canvas import Canvas
from glyphplot.graphs.rasterizer import Rasterizer
from glyphplot.graphs.renderer import create_bar_graph, create_line_graph, draw_line_graph
from glyphplot.graphs.scale import Scale
from glyphplot.graphs.types import Domain, DomainPolicy, GlyphPolicy, GraphOptions, Series

GraphType = Literal["line", "bar", "legacy"]
GraphGenerator = Callable[[Series, GraphOptions | Mapping[str, Any]], str]

GRAPH_GENERATORS: dict[str, GraphGenerator] = {
    "line": create_line_graph,
    "bar": create_bar_graph,
    "legacy": draw_line_graph,
}


def render(series: Series, options: GraphOptions | Mapping[str, Any], mode: GraphType = "line") -> str:
    """
    Render `series` with the generator registered for `mode`.

    Raises:
        ValueError if `mode` is not a known graph type.
    """
    generator = GRAPH_GENERATORS.get(mode)
    if generator is None:
        raise ValueError(f"Invalid graph type: {mode}. Available types: {', '.join(GRAPH_GENERATORS)}")
    return generator(series, options)


__all__ = [
    "GRAPH_GENERATORS",
    "GraphType",
    "GraphGenerator",
    "GraphOptions",
    "Domain",
    "DomainPolicy",
    "GlyphPolicy",
    "Scale",
    "Canvas",
    "Rasterizer",
    "Tick",
    "YAxis",
    "render",
    "draw_line_graph",
    "create_line_graph",
    "create_bar_graph",
    "select_label_indices",
    "layout_x_axis",
    "format_date_label",
]
