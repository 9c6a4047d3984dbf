"""
Transaction DAG analysis — CLI Interface.

Usage:
    # Analyse a transaction database with default settings
    txdag database.txt

    # JSON output with three decimals
    txdag database.txt --format json --decimals 3

    # Settings from a YAML file, with a flag overriding it
    txdag database.txt --config configs/txdag.yaml --max-nodes 5000
"""

from __future__ import annotations

import argparse
import logging
import sys

from .analysis import GraphAnalysisService
from .builder import DAGBuilder
from .config import MAX_DECIMALS, AnalysisConfig, load_config
from .errors import ConfigError, DAGError
from .report import collect_statistics, render_json, render_text

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ANALYSIS_FAILED = 1
EXIT_IO_FAILED = 2


def decimals_arg(value: str) -> int:
    try:
        decimals = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if not 0 <= decimals <= MAX_DECIMALS:
        raise argparse.ArgumentTypeError(
            f"must be between 0 and {MAX_DECIMALS}, got {decimals}"
        )
    return decimals


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="txdag",
        description="Build a transaction DAG from a database file and print its statistics.",
    )
    parser.add_argument("path", help="Transaction database file")
    parser.add_argument("--config", default=None, help="YAML configuration file")
    parser.add_argument(
        "--max-nodes", type=int, default=None, help="Largest accepted transaction count"
    )
    parser.add_argument("--root", type=int, default=None, help="Analysis root vertex id")
    parser.add_argument(
        "--decimals", type=decimals_arg, default=None, help="Decimal places for averages"
    )
    parser.add_argument(
        "--format", dest="output_format", choices=["text", "json"], default=None
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
    )
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> AnalysisConfig:
    """Build the effective config: file values, then command-line overrides."""
    return load_config(args.config).with_overrides(
        max_nodes=args.max_nodes,
        root=args.root,
        decimals=args.decimals,
        output_format=args.output_format,
        log_level=args.log_level,
    )


def run(path: str, config: AnalysisConfig) -> str:
    dag = DAGBuilder(max_nodes=config.max_nodes).build_from_file(path)
    service = GraphAnalysisService(dag, root_id=config.root)
    stats = collect_statistics(service)
    if config.output_format == "json":
        return render_json(stats, config.decimals)
    return render_text(stats, config.decimals)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = resolve_config(args)
    except (ConfigError, OSError, UnicodeDecodeError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_IO_FAILED

    logging.basicConfig(
        level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        output = run(args.path, config)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading the file: {e}", file=sys.stderr)
        return EXIT_IO_FAILED
    except DAGError as e:
        logger.debug("Analysis aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ANALYSIS_FAILED

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
