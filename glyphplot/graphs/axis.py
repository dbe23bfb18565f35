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

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass

from glyphplot.graphs.canvas import Canvas
from glyphplot.graphs.scale import Scale, round_half_up
from glyphplot.graphs.types import CROSS, TICK, Y_AXIS_STEP, Formatter

# Minimum columns reserved per x-axis label.
MIN_LABEL_SPACING = 10

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True, slots=True)
class Tick:
    row: int
    label: str


def stepped_ticks(scale: Scale, format: Formatter, step: int = Y_AXIS_STEP) -> list[Tick]:
    """
    One tick per multiple of `step` from the domain minimum to its maximum.

    Ticks are keyed by row: when two values round onto the same row the one
    computed last wins. Result is ordered top to bottom.
    """
    by_row: dict[int, str] = {}
    value = scale.domain.minimum
    while value <= scale.domain.maximum:
        row = scale.row_of(value)
        if 0 <= row <= scale.height:
            by_row[row] = format(value)
        value += step
    return [Tick(row=row, label=by_row[row]) for row in sorted(by_row)]


def row_ticks(scale: Scale, format: Formatter) -> list[Tick]:
    """A tick on every row, labelled with the value the row represents."""
    return [Tick(row=row, label=format(scale.value_at(row))) for row in range(scale.height + 1)]


class YAxis:
    """
    Left-hand axis: right-aligned labels followed by an axis glyph.

    With `cross_ticks` labelled rows get `┼` and the rest `┤`; without it
    only the baseline gets `┼`. The baseline is always `┼`.
    """

    def __init__(self, ticks: Sequence[Tick], *, cross_ticks: bool = True) -> None:
        self.labels = {tick.row: tick.label for tick in ticks}
        self.cross_ticks = cross_ticks
        self.label_width = max((len(label) for label in self.labels.values()), default=0)

    def glyph(self, row: int, height: int) -> str:
        if row == height:
            return CROSS
        if self.cross_ticks and row in self.labels:
            return CROSS
        return TICK

    def compose(self, canvas: Canvas, padding: str = "") -> list[str]:
        lines: list[str] = []
        for row, cells in enumerate(canvas.iter_rows()):
            label = self.labels.get(row, "").rjust(self.label_width)
            lines.append(f"{padding}{label} {self.glyph(row, canvas.height)}{cells}")
        return lines


# X-axis


def select_label_indices(point_count: int, graph_width: int) -> list[int]:
    """
    Pick which series indices get an x-axis label.

    At most graph_width // MIN_LABEL_SPACING labels (never fewer than one).
    Index 0 is always picked, then every `interval`-th index; the last index
    is added only if it is at least half an interval past the previous pick.
    """
    if point_count <= 0:
        return []

    label_count = min(max(1, graph_width // MIN_LABEL_SPACING), point_count)
    interval = math.ceil(point_count / label_count)

    selected = [0]
    selected.extend(range(interval, point_count - 1, interval))

    last = point_count - 1
    if point_count > 1 and (last - selected[-1] >= interval / 2 or len(selected) == 1):
        selected.append(last)
    return selected


def layout_x_axis(labels: Sequence[str], graph_width: int, margin: int = 0) -> str:
    """
    Lay out x-axis labels on a single line under a graph `graph_width` wide.

    The line starts with `margin` spaces so column 0 of the graph lines up
    with the first label. Labels are placed left to right; one that would
    start before the previous label ends is dropped. The last label is
    pulled left so it does not run past the graph's right edge.
    """
    count = len(labels)
    indices = select_label_indices(count, graph_width)
    spacing = graph_width / (count - 1) if count > 1 else 0.0

    line = " " * margin
    cursor = margin
    for position, index in enumerate(indices):
        text = labels[index]
        target = round_half_up(margin + index * spacing)
        if position == len(indices) - 1 and index == count - 1:
            target = min(target, margin + graph_width - len(text))
        if target < cursor:
            continue
        line += " " * (target - cursor) + text
        cursor = target + len(text)
    return line


def format_date_label(label: str) -> str:
    """Shorten an ISO date (YYYY-MM-DD) to MM/DD; other labels pass through."""
    if _ISO_DATE.match(label):
        return "/".join(label.split("-")[1:])
    return label
