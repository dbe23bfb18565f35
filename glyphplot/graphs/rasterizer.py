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

from collections.abc import Iterable, Iterator

from glyphplot.graphs.canvas import Canvas
from glyphplot.graphs.types import (
    CROSS,
    DOT,
    FALLING,
    HORIZONTAL,
    POINT,
    RISING,
    VERTICAL,
    GlyphPolicy,
)

Cell = tuple[int, int]

_HORIZONTAL_FAMILY = frozenset({HORIZONTAL, RISING, FALLING})
_VERTICAL_FAMILY = frozenset({VERTICAL, RISING, FALLING})


def trace(x1: int, y1: int, x2: int, y2: int) -> Iterator[Cell]:
    """
    Yield every (col, row) cell on the discrete line from (x1, y1) to (x2, y2).

    Integer Bresenham stepping; both endpoints are included.
    """
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    x, y = x1, y1
    while True:
        yield x, y
        if x == x2 and y == y2:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def segment_glyph(x1: int, y1: int, x2: int, y2: int) -> str:
    """Directional glyph for a whole segment."""
    if x1 == x2:
        return VERTICAL
    if y1 == y2:
        return HORIZONTAL
    # Rows grow downwards, so matching signs mean the line falls left to right.
    if (x2 > x1) == (y2 > y1):
        return FALLING
    return RISING


def combine_glyphs(previous: str, current: str) -> str:
    """Glyph for a cell crossed by two segments."""
    if previous in _HORIZONTAL_FAMILY and current in _VERTICAL_FAMILY:
        return CROSS
    if previous in _VERTICAL_FAMILY and current in _HORIZONTAL_FAMILY:
        return CROSS
    return current


class Rasterizer:
    """
    Draws line segments onto a Canvas under a glyph policy.

    DIRECTIONAL paints the segment's direction glyph and merges crossings.
    UNIFORM paints `DOT` into blank cells only, so the first write wins.
    """

    def __init__(self, canvas: Canvas, policy: GlyphPolicy = GlyphPolicy.DIRECTIONAL) -> None:
        self.canvas = canvas
        self.policy = policy

    def draw_segment(self, start: Cell, end: Cell) -> None:
        (x1, y1), (x2, y2) = start, end
        glyph = segment_glyph(x1, y1, x2, y2)

        for col, row in trace(x1, y1, x2, y2):
            if not self.canvas.contains(col, row):
                continue
            if self.policy == GlyphPolicy.UNIFORM:
                if self.canvas.is_blank(col, row):
                    self.canvas.put(col, row, DOT)
            elif self.canvas.is_blank(col, row):
                self.canvas.put(col, row, glyph)
            else:
                self.canvas.put(col, row, combine_glyphs(self.canvas.get(col, row), glyph))

    def draw_polyline(self, points: Iterable[Cell | None]) -> None:
        """
        Connect consecutive points. A None entry breaks the line on both sides.
        """
        previous: Cell | None = None
        for point in points:
            if previous is not None and point is not None:
                self.draw_segment(previous, point)
            previous = point

    def mark_points(self, points: Iterable[Cell | None], glyph: str = POINT) -> None:
        """Overwrite each point's cell with a marker, regardless of content."""
        for point in points:
            if point is not None:
                self.canvas.put(point[0], point[1], glyph)
