"""
Tests for chart configuration loading.
"""

import json
from pathlib import Path

import pytest
from glyphplot.core.config import ChartConfig, DefaultChartConfigLoader, find_config, load_config
from glyphplot.core.errors import ConfigLoadError


def write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestChartConfig:
    def test_defaults(self):
        cfg = ChartConfig()
        assert cfg.graph == "line"
        assert cfg.height == 15
        assert cfg.padding == "  "

    def test_formatter_pads_to_label_width(self):
        fmt = ChartConfig().formatter()
        assert fmt(12.4) == "   $12"
        assert fmt(0) == "    $0"

    def test_formatter_currency_and_decimals(self):
        fmt = ChartConfig(currency="€", decimals=2, label_width=0).formatter()
        assert fmt(3.14159) == "€3.14"

    def test_graph_options(self):
        opts = ChartConfig(width=50, height=8, padding="").graph_options()
        assert (opts.width, opts.height, opts.padding) == (50, 8, "")
        assert opts.format is not None
        assert opts.format(20) == "   $20"

    def test_default_width_follows_terminal(self, monkeypatch: pytest.MonkeyPatch):
        import os

        import glyphplot.core.config as config_mod

        monkeypatch.setattr(config_mod.shutil, "get_terminal_size", lambda fallback: os.terminal_size((100, 30)))
        assert ChartConfig().graph_options().width == 88

        monkeypatch.setattr(config_mod.shutil, "get_terminal_size", lambda fallback: os.terminal_size((40, 30)))
        assert ChartConfig().graph_options().width == 60

    def test_with_overrides_ignores_none(self):
        cfg = ChartConfig(graph="bar", height=9).with_overrides(graph=None, height=4, width=None)
        assert cfg.graph == "bar"
        assert cfg.height == 4
        assert cfg.width is None


class TestLoader:
    def test_load_yaml(self, tmp_path: Path):
        path = write(tmp_path / "glyphplot.yaml", "graph: bar\nheight: 12\npadding: '    '\ncurrency: '£'\n")
        cfg = DefaultChartConfigLoader().load(path)
        assert cfg == ChartConfig(graph="bar", height=12, padding="    ", currency="£")

    def test_load_json(self, tmp_path: Path):
        path = write(tmp_path / "glyphplot.json", json.dumps({"width": 70, "decimals": 1}))
        cfg = DefaultChartConfigLoader().load(path)
        assert cfg.width == 70
        assert cfg.decimals == 1

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = write(tmp_path / "glyphplot.yaml", "")
        assert DefaultChartConfigLoader().load(path) == ChartConfig()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigLoadError) as exc:
            DefaultChartConfigLoader().load(tmp_path / "nope.yaml")
        assert exc.value.code == "config_not_found"

    def test_root_must_be_mapping(self, tmp_path: Path):
        path = write(tmp_path / "glyphplot.yaml", "- 1\n- 2\n")
        with pytest.raises(ConfigLoadError) as exc:
            DefaultChartConfigLoader().load(path)
        assert exc.value.code == "invalid_config"

    def test_unknown_keys(self, tmp_path: Path):
        path = write(tmp_path / "glyphplot.yaml", "colour: red\nheight: 3\n")
        with pytest.raises(ConfigLoadError) as exc:
            DefaultChartConfigLoader().load(path)
        assert exc.value.code == "unknown_keys"
        assert exc.value.details == {"keys": ["colour"]}

    @pytest.mark.parametrize(
        "text",
        [
            "graph: pie\n",
            "graph: null\n",
            "height: tall\n",
            "height: null\n",
            "width: 0\n",
            "decimals: true\n",
            "decimals: -1\n",
            "label_width: -2\n",
            "label_width: null\n",
            "padding: 3\n",
        ],
    )
    def test_invalid_values(self, tmp_path: Path, text: str):
        path = write(tmp_path / "glyphplot.yaml", text)
        with pytest.raises(ConfigLoadError) as exc:
            DefaultChartConfigLoader().load(path)
        assert exc.value.code == "invalid_value"

    def test_null_width_fits_terminal(self, tmp_path: Path):
        path = write(tmp_path / "glyphplot.yaml", "width: null\nheight: 4\n")
        cfg = DefaultChartConfigLoader().load(path)
        assert cfg.width is None
        assert cfg.height == 4

    def test_parse_error(self, tmp_path: Path):
        path = write(tmp_path / "glyphplot.yaml", "graph: [bar\n")
        with pytest.raises(ConfigLoadError) as exc:
            DefaultChartConfigLoader().load(path)
        assert exc.value.code == "parse_error"
        assert str(exc.value).startswith("parse_error: ")


class TestDiscovery:
    def test_find_config_prefers_yaml(self, tmp_path: Path):
        write(tmp_path / "glyphplot.json", "{}")
        write(tmp_path / "glyphplot.yaml", "height: 3\n")
        assert find_config(tmp_path) == tmp_path / "glyphplot.yaml"

    def test_find_config_none(self, tmp_path: Path):
        assert find_config(tmp_path) is None

    def test_load_config_from_root(self, tmp_path: Path):
        write(tmp_path / "glyphplot.yml", "height: 3\n")
        assert load_config(root=tmp_path).height == 3

    def test_load_config_defaults_without_file(self, tmp_path: Path):
        assert load_config(root=tmp_path) == ChartConfig()

    def test_explicit_path_wins(self, tmp_path: Path):
        write(tmp_path / "glyphplot.yaml", "height: 3\n")
        other = write(tmp_path / "other.yaml", "height: 9\n")
        assert load_config(other, root=tmp_path).height == 9
