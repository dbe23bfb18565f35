import argparse
import logging
import sys

from glyphplot._version import _detect_version
from glyphplot.cli import plot
from glyphplot.cli.exitcodes import EXIT_ENGINE_ERROR, EXIT_INPUT_ERROR
from glyphplot.core.config import GRAPH_TYPES
from glyphplot.core.errors import ConfigLoadError, SeriesLoadError


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="glyphplot", description="Glyphplot: line and bar graphs for the terminal")
    p.add_argument("--version", action="version", version=f"%(prog)s {_detect_version()}")

    p.add_argument("input", nargs="?", default=None, help="Data file: JSON, YAML or text (default: stdin)")
    p.add_argument("-g", "--graph", choices=GRAPH_TYPES, default=None, help="Graph type (default: line).")
    p.add_argument("--width", type=int, default=None, help="Graph width in columns (default: fit terminal).")
    p.add_argument("--height", type=int, default=None, help="Graph height in rows (default: 15).")
    p.add_argument("--padding", default=None, help="Prefix for every graph line (default: two spaces).")
    p.add_argument("--config", default=None, help="Config file (default: glyphplot.yaml if present).")
    p.add_argument("--no-axis", dest="axis", action="store_false", help="Do not print x-axis labels.")
    p.add_argument("--no-summary", dest="summary", action="store_false", help="Do not print summary statistics.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")

    return p


def _configure_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("glyphplot")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    for name in ("width", "height"):
        value = getattr(args, name)
        if value is not None and value < 1:
            print(f"glyphplot: error: --{name} must be at least 1", file=sys.stderr)
            return EXIT_INPUT_ERROR

    try:
        return plot.run(
            input=args.input,
            graph=args.graph,
            width=args.width,
            height=args.height,
            padding=args.padding,
            config=args.config,
            axis=args.axis,
            summary=args.summary,
        )

    except (ConfigLoadError, SeriesLoadError) as e:
        print(f"glyphplot: error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    except Exception as e:
        print(f"glyphplot: error: {e}", file=sys.stderr)
        return EXIT_ENGINE_ERROR
