"""
Command-Line Interface for dose-response sweeps.

Reads a sample parameter table, sweeps the concentration series, and writes
the response matrix. Importable so it can be wired up as a console entry
point.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dose_sweep.config.loader import load_settings_from_yaml
from dose_sweep.config.settings import SweepSettings
from dose_sweep.errors import DoseSweepError
from dose_sweep.parser import parse_table_file
from dose_sweep.writer import resolve_output_path, write_output

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

OPTION_LABELS = {
    "input": "input file",
    "out_name": "output file name",
}


class _StoreOnce(argparse.Action):
    """Store an option value, rejecting a second occurrence."""

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest, None) is not None:
            parser.error(f"more than one {OPTION_LABELS[self.dest]} was provided")
        setattr(namespace, self.dest, values)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Predict responses over a concentration sweep from per-sample fit parameters.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
  dose-sweep --input params.txt
  dose-sweep -i params.txt -o curves      # writes curves.txt
        """,
    )

    parser.add_argument(
        "--input",
        "-i",
        action=_StoreOnce,
        required=True,
        metavar="PATH",
        help="Tab-separated table with columns name, ymin, ymax, EC50",
    )

    parser.add_argument(
        "--out-name",
        "-o",
        action=_StoreOnce,
        metavar="NAME",
        help="Output file base name; .txt is appended (default: out.txt)",
    )

    parser.add_argument(
        "--config",
        "-c",
        help="Path to YAML settings file (default: settings from environment)",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Log debug detail")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Log warnings and errors only")

    return parser


def run_sweep(input_path: str, out_name: Optional[str] = None,
              settings: Optional[SweepSettings] = None) -> Path:
    """Parse ``input_path`` and write the response matrix; return the output path."""
    settings = settings or SweepSettings()
    table = parse_table_file(input_path, settings)
    output_path = resolve_output_path(out_name, settings)
    write_output(output_path, table, settings)
    return output_path


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)

    if args.config and not os.path.exists(args.config):
        logger.error(f"Config file not found: {args.config}")
        return 1

    try:
        if args.config:
            settings = load_settings_from_yaml(args.config)
        else:
            settings = SweepSettings.load_from_env()
        run_sweep(args.input, args.out_name, settings)
    except DoseSweepError as exc:
        logger.error(f"{exc}. Aborting.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
