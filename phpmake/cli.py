"""phpmake command-line interface.

Usage::

    phpmake make:php --file Order
    phpmake make:php -f Item -p Order
    python -m phpmake make:php --file Order --base-dir ./my-laravel-app
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional, Sequence

from pydantic import ValidationError

from phpmake.config import ScaffoldConfig
from phpmake.scaffolder import (
    FileStatus,
    GenerationRequest,
    MissingArgumentError,
    ScaffoldReport,
    Scaffolder,
)
from phpmake.utils import (
    display_path,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on bad flags."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        print_error(f"{self.prog}: error: {message}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level parser with its ``make:php`` subcommand."""
    parser = _ArgumentParser(
        prog="phpmake",
        description="phpmake -- scaffold PHP models, validators, stores, presenters and controllers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  phpmake make:php --file Order\n"
            "  phpmake make:php -f Item -p Order\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    make_php = subparsers.add_parser(
        "make:php",
        help="Creates a new PHP file",
        description="Creates a new PHP file and its associated classes and directories.",
    )
    make_php.add_argument(
        "--file", "-f",
        default="",
        help="The name of the PHP file to create",
    )
    make_php.add_argument(
        "--father_path", "-p",
        default="",
        help="Parent path; becomes the namespace and the file-name prefix",
    )
    make_php.add_argument(
        "--base-dir", "-C",
        default=None,
        help="Directory the app tree is created under (default: current directory)",
    )
    make_php.add_argument(
        "--config",
        default=None,
        help="JSON file holding a saved scaffold configuration",
    )
    make_php.add_argument(
        "--template-dir",
        default=None,
        help="Directory of .j2 templates overriding the bundled ones",
    )
    return parser


def load_config(args: argparse.Namespace) -> ScaffoldConfig:
    """Build the effective configuration from a config file or the environment,
    then apply command-line overrides."""
    if args.config:
        config = ScaffoldConfig.load(Path(args.config))
    else:
        config = ScaffoldConfig.from_env()

    overrides: dict[str, Any] = {}
    if args.base_dir:
        overrides["base_dir"] = Path(args.base_dir)
    if args.template_dir:
        overrides["template_dir"] = Path(args.template_dir)
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def report_outcomes(report: ScaffoldReport, base_dir: Path) -> None:
    """Print one console line per failed directory and per artifact."""
    for outcome in report.failed_directories:
        print_error(outcome.error or f"Error creating directory {outcome.path}")

    for outcome in report.files:
        shown = display_path(outcome.path, base_dir)
        if outcome.status == FileStatus.CREATED:
            print_success(f"Created {shown}")
        elif outcome.status == FileStatus.SKIPPED:
            print_warning(f"{shown} already exists, skipping...")
        else:
            print_error(outcome.message)


def make_php(args: argparse.Namespace, config: ScaffoldConfig) -> ScaffoldReport:
    """Run the ``make:php`` subcommand and print its outcome."""
    request = GenerationRequest(file_name=args.file, father_path=args.father_path)
    report = Scaffolder(config).generate(request)

    report_outcomes(report, config.base_dir)
    print_summary_table(
        {
            "Namespace": request.namespace,
            "Class name": request.name,
            "Created": str(len(report.created)),
            "Skipped": str(len(report.skipped)),
            "Failed": str(len(report.failed) + len(report.failed_directories)),
        },
        title="make:php",
    )
    return report


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``phpmake`` and ``python -m phpmake``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args)
    except (OSError, ValidationError) as exc:
        print_error(f"Error loading configuration: {exc}")
        sys.exit(1)

    try:
        make_php(args, config)
    except MissingArgumentError as exc:
        print_error(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
