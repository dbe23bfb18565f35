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

from glyphplot._version import _detect_version
from glyphplot.graphs import (
    GRAPH_GENERATORS,
    GraphOptions,
    create_bar_graph,
    create_line_graph,
    draw_line_graph,
    layout_x_axis,
    render,
)

__version__ = _detect_version()

__all__ = [
    "__version__",
    "GRAPH_GENERATORS",
    "GraphOptions",
    "render",
    "draw_line_graph",
    "create_line_graph",
    "create_bar_graph",
    "layout_x_axis",
]
