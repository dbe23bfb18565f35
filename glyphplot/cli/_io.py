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
import math
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from glyphplot.core.errors import SeriesLoadError

_MISSING_TOKENS = frozenset({"-", "null", "none", "nan", ""})


@dataclass(frozen=True, slots=True)
class LoadedSeries:
    values: tuple[float | None, ...]
    labels: tuple[str, ...]


def read_input(path: str | None) -> tuple[str, str]:
    """Return (text, suffix) for a file path, or stdin for None / '-'."""
    if path is None or path == "-":
        return sys.stdin.read(), ""
    p = Path(path)
    if not p.exists():
        raise SeriesLoadError(code="input_not_found", message=f"Input file does not exist: {p}")
    return p.read_text(encoding="utf-8"), p.suffix.lower()


def load_series(path: str | None) -> LoadedSeries:
    text, suffix = read_input(path)
    return parse_series(text, suffix=suffix)


def parse_series(text: str, *, suffix: str = "") -> LoadedSeries:
    """
    Parse a series from JSON, YAML or plain text.

    Structured input may be a list of numbers, a list of {label, value}
    mappings, or a label -> value mapping. Plain text holds one entry per
    line, either `value` or `label value`.
    """
    stripped = text.lstrip()
    if suffix in (".json", ".yaml", ".yml") or stripped.startswith(("[", "{")):
        return _from_structured(_load_structured(text, suffix))
    return _from_lines(text)


def _load_structured(text: str, suffix: str) -> Any:
    try:
        if suffix == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SeriesLoadError(code="parse_error", message=f"Cannot parse input: {e}") from e


def _from_structured(data: Any) -> LoadedSeries:
    if data is None:
        return LoadedSeries(values=(), labels=())

    entries: list[tuple[str | None, Any]]
    if isinstance(data, Mapping):
        entries = [(str(k), v) for k, v in data.items()]
    elif isinstance(data, list):
        entries = []
        for item in data:
            if isinstance(item, Mapping):
                if "value" not in item:
                    raise SeriesLoadError(code="invalid_entry", message=f"Entry has no 'value': {dict(item)}")
                label = item.get("label", item.get("date"))
                entries.append((str(label) if label is not None else None, item["value"]))
            else:
                entries.append((None, item))
    else:
        raise SeriesLoadError(code="invalid_input", message="Input must be a list or a mapping.")

    values = tuple(_coerce_value(v, position=i + 1) for i, (_, v) in enumerate(entries))
    labels = tuple(label if label is not None else str(i + 1) for i, (label, _) in enumerate(entries))
    return LoadedSeries(values=values, labels=labels)


def _from_lines(text: str) -> LoadedSeries:
    values: list[float | None] = []
    labels: list[str] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        tokens = line.split()
        label = tokens[0] if len(tokens) > 1 else str(len(values) + 1)
        values.append(_coerce_value(tokens[-1], position=lineno))
        labels.append(label)

    return LoadedSeries(values=tuple(values), labels=tuple(labels))


def _coerce_value(raw: Any, *, position: int) -> float | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        if raw.strip().lower() in _MISSING_TOKENS:
            return None
        try:
            value = float(raw)
        except ValueError:
            raise SeriesLoadError(
                code="invalid_value",
                message=f"Not a number at entry {position}: {raw!r}",
                details={"position": position},
            ) from None
    elif isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise SeriesLoadError(
            code="invalid_value",
            message=f"Not a number at entry {position}: {raw!r}",
            details={"position": position},
        )
    else:
        value = float(raw)

    if math.isnan(value):
        return None
    if math.isinf(value):
        raise SeriesLoadError(
            code="invalid_value",
            message=f"Value at entry {position} is not finite",
            details={"position": position},
        )
    return value
