"""CLI command handlers for identcase.

Each public function corresponds to a CLI subcommand and encapsulates
the wiring and output for that command.  Handlers raise
:class:`~identcase.errors.ActionableError`; ``main`` turns it into an
exit status.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from identcase.arith import add_numbers
from identcase.camel import to_camel_case
from identcase.config import DEFAULT_SETTINGS_PATH, LOG_LEVELS, Settings, load_settings
from identcase.errors import ActionableError
from identcase.examples import DEFAULT_EXAMPLES, Example, format_result, load_examples, run_examples
from identcase.kebab import to_kebab_case
from identcase.logging import logger


def resolve_settings(path: str | None) -> Settings:
    """Load ``--settings`` if given, else the default file when it exists."""
    if path is not None:
        return load_settings(path)
    if DEFAULT_SETTINGS_PATH.exists():
        return load_settings(DEFAULT_SETTINGS_PATH)
    return Settings()


def parse_number(argument: str, raw: str) -> int | float:
    """Parse a command-line operand as int when integral, else float."""
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        raise ActionableError.invalid_number("add", argument, raw) from None


def handle_kebab(args: argparse.Namespace) -> None:
    """Print the kebab-case form of the argument."""
    print(to_kebab_case(args.text))


def handle_camel(args: argparse.Namespace) -> None:
    """Print the camelCase form of the argument."""
    print(to_camel_case(args.text))


def handle_add(args: argparse.Namespace) -> None:
    """Print the validated sum of two numbers."""
    a = parse_number("a", args.a)
    b = parse_number("b", args.b)
    print(add_numbers(a, b))


def handle_examples(args: argparse.Namespace, settings: Settings) -> int:
    """Run the example tables and print one line per example.

    Tables come from ``[examples].tables`` plus any ``--table`` options.
    Returns the process exit status: 0 when every example passed.
    """
    examples: list[Example] = []
    if settings.examples.include_defaults and not args.no_defaults:
        examples.extend(DEFAULT_EXAMPLES)

    for table in [*settings.examples.tables, *(args.table or [])]:
        examples.extend(load_examples(Path(table)))

    if not examples:
        print("No examples to run.")
        return 0

    results = run_examples(examples)
    for result in results:
        print(format_result(result))

    failed = [r for r in results if not r.passed]
    print(f"\n{len(results) - len(failed)}/{len(results)} examples passed.")
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identcase",
        description="Normalize identifiers to kebab-case or camelCase and add validated numbers",
    )
    parser.add_argument(
        "--settings",
        type=str,
        default=None,
        metavar="PATH",
        help=f"Settings file (default: {DEFAULT_SETTINGS_PATH} when present)",
    )
    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        default=None,
        help="Override [logging].level",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write logs to a timestamped file under [logging].log_dir",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- kebab ---------------------------------------------------------------
    kebab_p = sub.add_parser("kebab", help="Convert text to kebab-case")
    kebab_p.add_argument("text", type=str, help="Text to convert")

    # -- camel ---------------------------------------------------------------
    camel_p = sub.add_parser("camel", help="Convert text to camelCase")
    camel_p.add_argument("text", type=str, help="Text to convert")

    # -- add -----------------------------------------------------------------
    add_p = sub.add_parser("add", help="Add two validated numbers")
    add_p.add_argument("a", type=str, help="First operand")
    add_p.add_argument("b", type=str, help="Second operand")

    # -- examples ------------------------------------------------------------
    examples_p = sub.add_parser("examples", help="Run the example tables")
    examples_p.add_argument(
        "--table",
        action="append",
        metavar="PATH",
        help="Extra TOML example table (repeatable)",
    )
    examples_p.add_argument(
        "--no-defaults",
        action="store_true",
        help="Skip the built-in examples",
    )

    return parser


def report_error(exc: ActionableError) -> None:
    """Log an actionable error and print it with its suggestion on stderr."""
    logger.error("%s failed: %s", exc.service, exc.error)
    print(f"Error: {exc.error}", file=sys.stderr)
    if exc.suggestion:
        print(f"Suggestion: {exc.suggestion}", file=sys.stderr)
    if exc.troubleshooting:
        for step in exc.troubleshooting.steps:
            logger.debug("  %s", step)
