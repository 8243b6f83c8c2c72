"""Command-line entry point for the PHP security linter."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List

from .config import OUTPUT_FORMATS, load_config, split_list
from .errors import LinterError
from .linter import Linter
from .result import ScanResult, format_results

EXIT_OK = 0
EXIT_SCAN_ERROR = 2
EXIT_FATAL = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="php-sl",
        description="Lint PHP files for security issues based on CIS and OWASP guidance.",
        epilog=(
            "examples:\n"
            "  php-sl --path ./src\n"
            "  php-sl -p ./app --exclude .git,storage,vendor,tests\n"
            "  php-sl -p ./src --exclude-rules CIS-003,OWASP-001"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-p",
        "--path",
        default=None,
        help="Path to scan (required).",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Comma-separated paths to exclude (repeatable); added to the defaults.",
    )
    parser.add_argument(
        "--exclude-rules",
        dest="exclude_rules",
        action="append",
        default=[],
        help="Comma-separated rule IDs to ignore (repeatable).",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Console report format (defaults to text).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        default=None,
        help="Path to also write the JSON report to (e.g., artifacts/php-sl.json).",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="YAML configuration file (defaults to .php-sl.yaml when present).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run_scan(path: str, exclude: Iterable[str], exclude_rules: Iterable[str]) -> ScanResult:
    linter = Linter(exclude_rules=exclude_rules)
    return linter.scan(path, list(exclude))


def write_output(result: ScanResult, output_path: str | None, report_format: str) -> None:
    payload = json.dumps(result.to_dict(), indent=2)
    if report_format == "json":
        print(payload)
    else:
        print(format_results(result))

    if output_path:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload, encoding="utf-8")
        if report_format != "json":
            print(f"\nReport written to {output_path}")


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.path:
        parser.print_help()
        return EXIT_OK

    try:
        config = load_config(args.config_path).merge(
            exclude=split_list(args.exclude),
            exclude_rules=split_list(args.exclude_rules),
            report_format=args.format,
        )
        result = run_scan(args.path, config.exclude, config.exclude_rules)
    except LinterError as exc:
        sys.stderr.write(f"SCAN ERROR [{exc.code}]: {exc}\n")
        return EXIT_SCAN_ERROR
    except Exception as exc:  # pylint: disable=broad-except
        sys.stderr.write(f"FATAL ERROR: {exc}\n")
        return EXIT_FATAL

    write_output(result, args.output_path, config.format)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
