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
import math
from dataclasses import dataclass

from glyphplot.graphs.canvas import Canvas
from glyphplot.graphs.scale import Scale
from glyphplot.graphs.types import BLOCK, Formatter, Series, is_missing

LOGGER = logging.getLogger(__name__)

# Share of a slot taken by the bar itself.
_BAR_FILL_RATIO = 0.8


@dataclass(frozen=True, slots=True)
class BarLayout:
    """
    Horizontal placement of bars on a canvas `width` columns wide.

    One column is reserved at each edge; the rest is split into equal slots,
    one per series entry. Bars are centred-ish in their slot, with at least
    one column of spacing on the left.
    """

    width: int
    slot_width: int
    bar_width: int
    spacing: int

    @staticmethod
    def compute(count: int, width: int) -> "BarLayout":
        slot_width = (width - 2) // count
        bar_width = max(1, math.floor(slot_width * _BAR_FILL_RATIO))
        spacing = max(1, (slot_width - bar_width) // 2)
        return BarLayout(width=width, slot_width=slot_width, bar_width=bar_width, spacing=spacing)

    def span(self, index: int) -> tuple[int, int]:
        """Half-open column range [start, end) of bar `index`."""
        start = 1 + index * self.slot_width + self.spacing
        return start, min(start + self.bar_width, self.width)


def fill_bars(canvas: Canvas, series: Series, scale: Scale, layout: BarLayout, format: Formatter) -> None:
    """
    Draw one solid bar per present value, growing up from the baseline.

    Bars whose top stays below the second row get their formatted value
    written just above them, centred on the bar.
    """
    height = canvas.height

    for index, value in enumerate(series):
        if is_missing(value):
            continue
        bar_height = scale.bar_height(value)  # type: ignore[arg-type]
        start, end = layout.span(index)

        for row in range(height, height - bar_height, -1):
            for col in range(start, end):
                canvas.put(col, row, BLOCK)

        if bar_height < height - 1:
            _write_value(canvas, format(value), start, height - bar_height, layout.bar_width)  # type: ignore[arg-type]

    LOGGER.debug(
        "Filled %d bars (slot=%d, bar=%d, spacing=%d)",
        len(series),
        layout.slot_width,
        layout.bar_width,
        layout.spacing,
    )


def _write_value(canvas: Canvas, text: str, bar_start: int, row: int, bar_width: int) -> None:
    col = bar_start + (bar_width - len(text)) // 2
    for offset, char in enumerate(text):
        canvas.put(col + offset, row, char)
