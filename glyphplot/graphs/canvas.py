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

from collections.abc import Iterator

from glyphplot.graphs.types import BLANK


class Canvas:
    """
    Mutable character grid of `height + 1` rows by `width` columns.

    Cells live in one flat buffer indexed by `row * width + col`. Writes
    outside the grid are dropped silently; rounding can legitimately put
    an endpoint one cell off the edge.
    """

    __slots__ = ("width", "height", "_cells")

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells: list[str] = [BLANK] * (width * (height + 1))

    @property
    def rows(self) -> int:
        return self.height + 1

    def contains(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row <= self.height

    def get(self, col: int, row: int) -> str:
        if not self.contains(col, row):
            return BLANK
        return self._cells[row * self.width + col]

    def put(self, col: int, row: int, glyph: str) -> bool:
        if not self.contains(col, row):
            return False
        self._cells[row * self.width + col] = glyph
        return True

    def is_blank(self, col: int, row: int) -> bool:
        return self.get(col, row) == BLANK

    def row_text(self, row: int) -> str:
        start = row * self.width
        return "".join(self._cells[start : start + self.width])

    def iter_rows(self) -> Iterator[str]:
        for row in range(self.rows):
            yield self.row_text(row)
