from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from opresult.api import combine_files, run_plan
from opresult.configuration import ConfigError
from opresult.reporting import report_result
from opresult.serialization import ResultDecodeError, dumps_result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Combine operation results into one outcome.")
    parser.add_argument("plan_yaml", type=Path, nargs="?", help="Path to combine plan YAML")
    parser.add_argument(
        "--results",
        dest="result_files",
        type=Path,
        nargs="+",
        default=None,
        help="Result JSON files to fold left to right (instead of a plan)",
    )
    return parser


def parse_args(
    parser: argparse.ArgumentParser, argv: list[str] | None = None
) -> argparse.Namespace:
    args = parser.parse_args(argv)
    if (args.plan_yaml is None) == (args.result_files is None):
        parser.error("provide exactly one of a plan YAML or --results")
    return args


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    parser = build_parser()
    args = parse_args(parser, argv)

    try:
        if args.plan_yaml is not None:
            result = run_plan(args.plan_yaml)
        else:
            result = combine_files(args.result_files)
    except (ConfigError, ResultDecodeError, OSError) as exc:
        parser.exit(2, f"{parser.prog}: error: {exc}\n")

    print(dumps_result(result, indent=2))
    report_result(result)
    return 1 if result.is_error else 0


if __name__ == "__main__":
    sys.exit(main())
