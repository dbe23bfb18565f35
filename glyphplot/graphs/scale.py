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
from dataclasses import dataclass

from glyphplot.graphs.types import Domain


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties towards positive infinity.

    Python's round() uses banker's rounding, which would shift points that
    fall exactly between two cells.
    """
    return math.floor(value + 0.5)


@dataclass(frozen=True, slots=True)
class Scale:
    """
    Maps data values to canvas rows and series indices to canvas columns.

    Row 0 is the top of the canvas (domain maximum), row `height` is the
    baseline (domain minimum). Values are not clamped: the domain is derived
    from the same series, and callers drop cells that fall off the canvas.
    """

    domain: Domain
    width: int
    height: int
    count: int

    @property
    def x_step(self) -> float:
        if self.count < 2:
            return 0.0
        return (self.width - 1) / (self.count - 1)

    def row_of(self, value: float) -> int:
        normalized = (value - self.domain.minimum) / self.domain.span
        return round_half_up(self.height - normalized * self.height)

    def col_of(self, index: int) -> int:
        return round_half_up(index * self.x_step)

    def bar_height(self, value: float) -> int:
        """Number of rows a bar of `value` covers above the baseline."""
        normalized = (value - self.domain.minimum) / self.domain.span
        return round_half_up(normalized * self.height)

    def value_at(self, row: int) -> float:
        """Domain value represented by a row (inverse of row_of, unrounded)."""
        return self.domain.maximum - (row / self.height) * self.domain.span
