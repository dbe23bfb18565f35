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

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from glyphplot.graphs.axis import YAxis, row_ticks, stepped_ticks
from glyphplot.graphs.bars import BarLayout, fill_bars
from glyphplot.graphs.canvas import Canvas
from glyphplot.graphs.rasterizer import Cell, Rasterizer
from glyphplot.graphs.scale import Scale
from glyphplot.graphs.types import (
    BLOCK,
    CROSS,
    HORIZONTAL,
    POINT,
    Domain,
    DomainPolicy,
    Formatter,
    GlyphPolicy,
    GraphOptions,
    Series,
    currency_format,
    fixed_format,
    is_missing,
    present_values,
)

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GraphStyle:
    """
    Everything that differs between graph modes.

    The drawing pipeline is shared; a style only picks the domain policy,
    the glyph policy, how the canvas is filled and how the axis is labelled.
    """

    name: str
    domain_policy: DomainPolicy
    glyph_policy: GlyphPolicy
    default_format: Formatter
    bars: bool = False
    markers: bool = False
    stepped_axis: bool = True
    # Glyph closing the single-point rule; None keeps the full-width rule.
    single_point_tail: str | None = None


LEGACY_LINE = GraphStyle(
    name="legacy",
    domain_policy=DomainPolicy.TIGHT,
    glyph_policy=GlyphPolicy.DIRECTIONAL,
    default_format=fixed_format,
    stepped_axis=False,
)

SMOOTH_LINE = GraphStyle(
    name="line",
    domain_policy=DomainPolicy.STEPPED,
    glyph_policy=GlyphPolicy.UNIFORM,
    default_format=currency_format,
    markers=True,
    single_point_tail=POINT,
)

BARS = GraphStyle(
    name="bar",
    domain_policy=DomainPolicy.STEPPED,
    glyph_policy=GlyphPolicy.UNIFORM,
    default_format=currency_format,
    bars=True,
    single_point_tail=BLOCK,
)


def render_graph(series: Series, options: GraphOptions | Mapping[str, Any], style: GraphStyle) -> str:
    """
    Render `series` as a text graph in the given style.

    Returns "" for an empty series, a single rule line for a one-entry
    series, and height + 1 lines otherwise.
    """
    opts = GraphOptions.coerce(options)
    fmt = opts.format or style.default_format

    if not series:
        return ""
    if len(series) == 1:
        return _render_single_point(series[0], opts, fmt, style)

    values = present_values(series)
    domain = Domain.for_policy(style.domain_policy, values)
    scale = Scale(domain=domain, width=opts.width, height=opts.height, count=len(series))
    canvas = Canvas(opts.width, opts.height)

    LOGGER.debug(
        "Rendering %s graph: %d points, domain [%s, %s], %dx%d",
        style.name,
        len(series),
        domain.minimum,
        domain.maximum,
        opts.width,
        opts.height,
    )

    if style.bars:
        fill_bars(canvas, series, scale, BarLayout.compute(len(series), opts.width), fmt)
    else:
        points = _plot_points(series, scale)
        rasterizer = Rasterizer(canvas, style.glyph_policy)
        rasterizer.draw_polyline(points)
        if style.markers:
            rasterizer.mark_points(points)

    ticks = stepped_ticks(scale, fmt) if style.stepped_axis else row_ticks(scale, fmt)
    axis = YAxis(ticks, cross_ticks=style.stepped_axis)
    return "\n".join(axis.compose(canvas, opts.padding))


def _plot_points(series: Series, scale: Scale) -> list[Cell | None]:
    return [
        None if is_missing(value) else (scale.col_of(index), scale.row_of(value))  # type: ignore[arg-type]
        for index, value in enumerate(series)
    ]


def _render_single_point(value: float | None, opts: GraphOptions, fmt: Formatter, style: GraphStyle) -> str:
    if is_missing(value):
        return ""
    if style.single_point_tail is None:
        rule = HORIZONTAL * opts.width
    else:
        rule = HORIZONTAL * (opts.width - 1) + style.single_point_tail
    return f"{opts.padding}{fmt(value)} {CROSS}{rule}"  # type: ignore[arg-type]


def draw_line_graph(series: Series, options: GraphOptions | Mapping[str, Any]) -> str:
    """
    Plain line graph over the tight data domain.

    Segments use direction glyphs (─ │ ╱ ╲) and crossings become ┼. Every
    row is labelled with the value it represents.
    """
    return render_graph(series, options, LEGACY_LINE)


def create_line_graph(series: Series, options: GraphOptions | Mapping[str, Any]) -> str:
    """
    Dotted line graph on a zero-based axis stepped in units of 20, with ●
    marking each data point.
    """
    return render_graph(series, options, SMOOTH_LINE)


def create_bar_graph(series: Series, options: GraphOptions | Mapping[str, Any]) -> str:
    """Vertical bar graph on a zero-based axis stepped in units of 20."""
    return render_graph(series, options, BARS)
