"""Example tables and the runner that checks them.

An example pairs one call to a conversion utility with the output it
must produce.  The built-in table covers the documented behaviour of
each utility; extra tables can be loaded from TOML::

    [[kebab]]
    input = "fooBarBAZ"
    expected = "foo-bar-baz"

    [[camel]]
    input = "user_id"
    expected = "userId"

    [[add]]
    a = 5
    b = 3
    expected = 8
"""

from __future__ import annotations

import tomllib
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from identcase.arith import add_numbers
from identcase.camel import to_camel_case
from identcase.errors import ActionableError
from identcase.kebab import to_kebab_case
from identcase.logging import logger

OPERATIONS: dict[str, Callable[..., Any]] = {
    "kebab": to_kebab_case,
    "camel": to_camel_case,
    "add": add_numbers,
}

# Keys each [[operation]] entry must carry, in call order
_ARGUMENT_KEYS: dict[str, tuple[str, ...]] = {
    "kebab": ("input",),
    "camel": ("input",),
    "add": ("a", "b"),
}


@dataclass(frozen=True)
class Example:
    """One call and its expected result."""

    operation: str
    args: tuple[Any, ...]
    expected: Any


@dataclass(frozen=True)
class ExampleResult:
    """Outcome of running a single :class:`Example`."""

    example: Example
    output: Any
    passed: bool
    error: str | None = None


DEFAULT_EXAMPLES: tuple[Example, ...] = (
    Example("kebab", ("fooBarBAZ",), "foo-bar-baz"),
    Example("kebab", ("foo__bar  baz--qux",), "foo-bar-baz-qux"),
    Example("kebab", ("__foo-bar! ",), "foo-bar"),
    Example("kebab", ("getHTTPResponse",), "get-http-response"),
    Example("kebab", ("foo2Bar 3baz",), "foo2-bar-3baz"),
    Example("kebab", ("  --My__Test123--Case!! ",), "my-test123-case"),
    Example("camel", ("first name",), "firstName"),
    Example("camel", ("user_id",), "userId"),
    Example("camel", ("SCREEN_NAME",), "screenName"),
    Example("camel", ("mobile-number",), "mobileNumber"),
    Example("add", (5, 3), 8),
)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_examples(path: str | Path) -> list[Example]:
    """Load an example table from a TOML file.

    Raises :class:`~identcase.errors.ActionableError`:
      - CONFIG if the file does not exist
      - PARSE if the TOML is malformed
      - VALIDATION if an entry is not a table or lacks a required key
    """
    filepath = Path(path)
    if not filepath.exists():
        raise ActionableError.config(
            field_name="examples.tables",
            reason=f"Example table not found: {filepath}",
            suggestion=f"Create {filepath} or remove it from [examples].tables",
        )

    try:
        raw_text = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ActionableError.from_exception(exc, str(filepath), "load") from None

    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ActionableError.parse(source=str(filepath), raw_error=str(exc)) from None

    examples: list[Example] = []
    for operation, keys in _ARGUMENT_KEYS.items():
        entries = data.get(operation, [])
        if not isinstance(entries, list):
            raise ActionableError.validation(
                field_name=f"{filepath}:{operation}",
                reason=f"must be an array of tables ([[{operation}]])",
            )
        for index, entry in enumerate(entries):
            examples.append(_parse_entry(operation, keys, entry, f"{filepath}:{operation}[{index}]"))

    logger.debug("Loaded %d examples from %s", len(examples), filepath)
    return examples


def _parse_entry(operation: str, keys: tuple[str, ...], entry: object, where: str) -> Example:
    if not isinstance(entry, dict):
        raise ActionableError.validation(field_name=where, reason="entry must be a table")
    for key in (*keys, "expected"):
        if key not in entry:
            raise ActionableError.validation(
                field_name=f"{where}.{key}",
                reason=f"required key '{key}' is missing",
                suggestion=f"Add '{key}' to every [[{operation}]] entry",
            )
    return Example(operation, tuple(entry[key] for key in keys), entry["expected"])


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------


def run_example(example: Example) -> ExampleResult:
    """Run one example.  An :class:`ActionableError` fails the example."""
    func = OPERATIONS[example.operation]
    try:
        output = func(*example.args)
    except ActionableError as exc:
        logger.warning("%s%r raised %s: %s", example.operation, example.args, exc.error_type, exc.error)
        return ExampleResult(example=example, output=None, passed=False, error=exc.error)

    passed = output == example.expected
    if not passed:
        logger.warning(
            "%s%r returned %r, expected %r",
            example.operation,
            example.args,
            output,
            example.expected,
        )
    return ExampleResult(example=example, output=output, passed=passed)


def run_examples(examples: Iterable[Example] = DEFAULT_EXAMPLES) -> list[ExampleResult]:
    """Run every example in order and log a pass/fail summary."""
    results = [run_example(example) for example in examples]
    failed = sum(1 for r in results if not r.passed)
    logger.info("Ran %d examples: %d passed, %d failed", len(results), len(results) - failed, failed)
    return results


def format_result(result: ExampleResult) -> str:
    """Render a result as ``Input: "…" | Output: "…" | Expected: "…"``."""
    example = result.example
    shown_input = ", ".join(str(arg) for arg in example.args)
    shown_output = result.output if result.error is None else f"error: {result.error}"
    return f'Input: "{shown_input}" | Output: "{shown_output}" | Expected: "{example.expected}"'
