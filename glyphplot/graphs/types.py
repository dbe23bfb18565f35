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
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

# Glyphs

HORIZONTAL = "─"
VERTICAL = "│"
RISING = "╱"
FALLING = "╲"
CROSS = "┼"
TICK = "┤"
POINT = "●"
BLOCK = "█"
DOT = "·"
BLANK = " "

# Distance between two labelled rows on a stepped y-axis.
Y_AXIS_STEP = 20

Formatter = Callable[[float], str]
Series = Sequence[float | None]


def currency_format(value: float) -> str:
    return f"${value:.0f}"


def fixed_format(value: float) -> str:
    return f"{value:.2f}"


def is_missing(value: float | None) -> bool:
    """
    Whether a series entry carries no plottable value (None or NaN).
    """
    return value is None or (isinstance(value, float) and math.isnan(value))


def present_values(series: Series) -> list[float]:
    return [v for v in series if not is_missing(v)]  # type: ignore[misc]


class DomainPolicy(StrEnum):
    """
    How the numeric domain is derived from a series.

      TIGHT   → min/max straight from the data
      STEPPED → min fixed at 0, max rounded up to the next Y_AXIS_STEP
    """

    TIGHT = "tight"
    STEPPED = "stepped"


class GlyphPolicy(StrEnum):
    """
    How traced cells are painted.

      DIRECTIONAL → one of ─ │ ╱ ╲ per segment, crossings merge into ┼
      UNIFORM     → a single dot glyph, the first write to a cell wins
    """

    DIRECTIONAL = "directional"
    UNIFORM = "uniform"


@dataclass(frozen=True, slots=True)
class GraphOptions:
    """
    Rendering options for a single graph.

    `width` and `height` must be positive; they are not validated here.
    `height` excludes the baseline row, so a graph has height + 1 rows.
    """

    width: int
    height: int
    padding: str = ""
    format: Formatter | None = None

    @staticmethod
    def coerce(options: "GraphOptions | Mapping[str, Any]") -> "GraphOptions":
        if isinstance(options, GraphOptions):
            return options
        return GraphOptions(
            width=int(options["width"]),
            height=int(options["height"]),
            padding=options.get("padding") or "",
            format=options.get("format"),
        )


@dataclass(frozen=True, slots=True)
class Domain:
    """
    Numeric range mapped onto canvas rows; `minimum` sits on the baseline.
    """

    minimum: float
    maximum: float

    @property
    def span(self) -> float:
        return self.maximum - self.minimum or 1

    @staticmethod
    def tight(values: Iterable[float]) -> "Domain":
        values = list(values)
        if not values:
            return Domain(minimum=-0.5, maximum=0.5)
        lo, hi = min(values), max(values)
        if lo == hi:
            # Centre a flat series so its rule lands on the middle row.
            return Domain(minimum=lo - 0.5, maximum=hi + 0.5)
        return Domain(minimum=lo, maximum=hi)

    @staticmethod
    def stepped(values: Iterable[float], step: int = Y_AXIS_STEP) -> "Domain":
        data_max = max(values, default=0)
        y_max = math.ceil(data_max / step) * step
        # Never below one step: negative data sits under the baseline.
        return Domain(minimum=0, maximum=max(y_max, step))

    @staticmethod
    def for_policy(policy: DomainPolicy, values: Iterable[float]) -> "Domain":
        if policy == DomainPolicy.TIGHT:
            return Domain.tight(values)
        return Domain.stepped(values)
