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

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_ENGINE_ERROR = 2
