"""
CLI entry point for edlpy.

Usage:
    edlpy lint <file>...              Report diagnostics for EDL files
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from edlpy import __version__
from edlpy.diagnostics import Diagnostic, count_by_severity, format_diagnostic, has_errors
from edlpy.pipeline import validate_document
from edlpy.settings import EdlSettings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LINT_ERRORS = 1
EXIT_IO_ERROR = 2


def cmd_lint(args: argparse.Namespace) -> int:
    """Lint files and print their diagnostics."""
    settings = EdlSettings(linting_enabled=not args.disable_linting)
    results: dict[str, list[Diagnostic]] = {}
    exit_code = EXIT_OK

    for name in args.files:
        path = Path(name)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"{name}: cannot read file: {exc}", file=sys.stderr)
            exit_code = EXIT_IO_ERROR
            continue
        results[name] = validate_document(path.resolve().as_uri(), text, settings)

    if args.format == "json":
        print(json.dumps({name: [_to_json(d) for d in diagnostics] for name, diagnostics in results.items()}, indent=2))
    else:
        total = 0
        for name, diagnostics in results.items():
            for diagnostic in diagnostics:
                print(format_diagnostic(diagnostic, path=name))
            total += len(diagnostics)
        counts = count_by_severity(d for diagnostics in results.values() for d in diagnostics)
        if total:
            print(
                f"\n{total} issues found "
                f"({counts['error']} errors, {counts['warning']} warnings, {counts['information']} information)"
            )
        else:
            print("No issues found")

    if exit_code == EXIT_OK and any(has_errors(diagnostics) for diagnostics in results.values()):
        exit_code = EXIT_LINT_ERRORS
    return exit_code


def _to_json(diagnostic: Diagnostic) -> dict[str, object]:
    return {
        "code": diagnostic.code,
        "message": diagnostic.message,
        "severity": diagnostic.severity,
        "range": list(diagnostic.range.as_tuple()),
        "category": diagnostic.category,
        "hint": diagnostic.hint,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edlpy",
        description="EDL language tooling",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    edlpy lint machines/door.edl
    edlpy lint --format json machines/*.edl
""",
    )
    parser.add_argument("--version", action="version", version=f"edlpy {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # lint
    lint_p = subparsers.add_parser("lint", help="Lint EDL files")
    lint_p.add_argument("files", nargs="+", help="Files to lint")
    lint_p.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    lint_p.add_argument(
        "--disable-linting",
        action="store_true",
        help="Run with linting disabled (reports nothing)",
    )
    lint_p.set_defaults(func=cmd_lint)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    logger.debug("Running command %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
