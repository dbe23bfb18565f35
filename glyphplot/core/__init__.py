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

from glyphplot.core.config import ChartConfig, DefaultChartConfigLoader, load_config
from glyphplot.core.errors import ConfigLoadError, SeriesLoadError

__all__ = [
    "ChartConfig",
    "DefaultChartConfigLoader",
    "load_config",
    "ConfigLoadError",
    "SeriesLoadError",
]
