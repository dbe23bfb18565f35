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

import json
import shutil
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from glyphplot.core.errors import ConfigLoadError
from glyphplot.graphs.types import Formatter, GraphOptions

CONFIG_FILENAMES = ("glyphplot.yaml", "glyphplot.yml", "glyphplot.json")
GRAPH_TYPES = ("line", "bar", "legacy")

# Columns left for the y-axis labels when sizing to the terminal.
_AXIS_RESERVE = 12
_MIN_WIDTH = 60


def default_width() -> int:
    columns = shutil.get_terminal_size((120, 24)).columns
    return max(_MIN_WIDTH, columns - _AXIS_RESERVE)


@dataclass(frozen=True)
class ChartConfig:
    graph: str = "line"
    width: int | None = None
    height: int = 15
    padding: str = "  "
    currency: str = "$"
    decimals: int = 0
    label_width: int = 6

    def formatter(self) -> Formatter:
        currency, decimals, label_width = self.currency, self.decimals, self.label_width

        def fmt(value: float) -> str:
            return f"{currency}{value:.{decimals}f}".rjust(label_width)

        return fmt

    def graph_options(self) -> GraphOptions:
        return GraphOptions(
            width=self.width if self.width is not None else default_width(),
            height=self.height,
            padding=self.padding,
            format=self.formatter(),
        )

    def with_overrides(self, **overrides: Any) -> "ChartConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


class DefaultChartConfigLoader:
    """
    Loads a ChartConfig from glyphplot.yaml / glyphplot.yml / glyphplot.json
    """

    def load(self, path: Path) -> ChartConfig:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            raise ConfigLoadError(code="config_not_found", message=f"Config file does not exist: {path}")

        data = self._read_config_file(path)
        if data is None:
            return ChartConfig()
        if not isinstance(data, dict):
            raise ConfigLoadError(code="invalid_config", message="Config root must be a mapping/object.")

        known = {f.name for f in fields(ChartConfig)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigLoadError(
                code="unknown_keys",
                message=f"Unknown config keys: {', '.join(unknown)}",
                details={"keys": unknown},
            )

        if "graph" in data:
            self._check_graph(data["graph"])
        for key in ("width", "height", "decimals", "label_width"):
            self._check_int(data, key)
        for key in ("padding", "currency"):
            if key in data and not isinstance(data[key], str):
                raise ConfigLoadError(code="invalid_value", message=f"'{key}' must be a string.")

        return ChartConfig(**data)

    def _read_config_file(self, path: Path) -> Any:
        text = path.read_text(encoding="utf-8")
        try:
            if path.suffix.lower() == ".json":
                return json.loads(text)
            return yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigLoadError(code="parse_error", message=f"Cannot parse {path.name}: {e}") from e

    @staticmethod
    def _check_graph(graph: Any) -> None:
        if graph not in GRAPH_TYPES:
            raise ConfigLoadError(
                code="invalid_value",
                message=f"'graph' must be one of: {', '.join(GRAPH_TYPES)}.",
            )

    @staticmethod
    def _check_int(data: Mapping[str, Any], key: str) -> None:
        if key not in data:
            return
        value = data[key]
        # null width means "fit the terminal"
        if value is None and key == "width":
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigLoadError(code="invalid_value", message=f"'{key}' must be an integer.")
        minimum = 1 if key in ("width", "height") else 0
        if value < minimum:
            raise ConfigLoadError(code="invalid_value", message=f"'{key}' must be at least {minimum}.")


def find_config(root: str | Path) -> Path | None:
    p = Path(root)
    for name in CONFIG_FILENAMES:
        candidate = p / name
        if candidate.exists():
            return candidate
    return None


def load_config(path: str | Path | None = None, *, root: str | Path = ".") -> ChartConfig:
    """
    Load the chart config from `path`, or from the first config file found
    in `root`. Falls back to defaults when there is none.
    """
    resolved = Path(path) if path is not None else find_config(root)
    if resolved is None:
        return ChartConfig()
    return DefaultChartConfigLoader().load(resolved)
