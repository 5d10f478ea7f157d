"""Identifier normalizer: arbitrary text to canonical kebab-case.

Segments mixed-notation identifiers (camelCase, PascalCase, acronym
runs, snake_case, kebab-case, space-separated phrases, embedded digits,
stray punctuation) into words and re-emits them lowercased and joined
with single hyphens.

The segmentation is a fixed sequence of passes over the text.  Each pass
only inserts or removes characters; word boundaries are carried between
passes as single spaces.  Order matters: case analysis runs before
punctuation is stripped, so punctuation never looks like a letter and a
stripped character never creates a boundary of its own.

Pure functions with no I/O, safe to call from any thread.
"""

from __future__ import annotations

import re

from identcase.errors import ActionableError

BOUNDARY = " "

# Runs of underscore, hyphen and whitespace
_SEPARATOR_RUN = re.compile(r"[_\-\s]+")
# Lowercase letter or digit followed by an uppercase letter
_CASE_TRANSITION = re.compile(r"([a-z0-9])([A-Z])")
# Uppercase run followed by the first letter of a capitalised word
_ACRONYM_TAIL = re.compile(r"([A-Z]+)([A-Z][a-z0-9]+)")
# Anything that is not ASCII alphanumeric or a boundary
_PUNCTUATION = re.compile(r"[^a-zA-Z0-9 ]+")


def collapse_separators(text: str) -> str:
    """Replace every run of ``_``, ``-`` and whitespace with one boundary."""
    return _SEPARATOR_RUN.sub(BOUNDARY, text)


def split_case_transitions(text: str) -> str:
    """Insert a boundary between a lowercase letter or digit and an uppercase letter.

    >>> split_case_transitions("foo2BarBaz")
    'foo2 Bar Baz'
    """
    return _CASE_TRANSITION.sub(rf"\1{BOUNDARY}\2", text)


def split_acronyms(text: str) -> str:
    """Detach the last letter of an uppercase run when it starts a word.

    ``HTTPResponse`` becomes ``HTTP Response``.  A run followed by the end
    of the text or by a non-alphanumeric character is left whole.

    >>> split_acronyms("HTTPResponse")
    'HTTP Response'
    >>> split_acronyms("BAZ")
    'BAZ'
    """
    return _ACRONYM_TAIL.sub(rf"\1{BOUNDARY}\2", text)


def strip_punctuation(text: str) -> str:
    """Delete everything except ASCII letters, digits and boundaries."""
    return _PUNCTUATION.sub("", text)


def _segment(text: str) -> list[str]:
    marked = collapse_separators(text)
    marked = split_case_transitions(marked)
    marked = split_acronyms(marked)
    marked = strip_punctuation(marked)
    return [word.lower() for word in marked.split(BOUNDARY) if word]


def to_kebab_case(value: object) -> str:
    """Convert *value* to canonical kebab-case.

    Raises :class:`~identcase.errors.ActionableError` (TYPE_KIND) when
    *value* is not a ``str``.  Any text is accepted; input with no ASCII
    letters or digits yields ``""``.

    >>> to_kebab_case("getHTTPResponse")
    'get-http-response'
    >>> to_kebab_case("  --My__Test123--Case!! ")
    'my-test123-case'
    """
    if not isinstance(value, str):
        raise ActionableError.type_kind("to_kebab_case", value)
    return "-".join(_segment(value))


__all__ = [
    "collapse_separators",
    "split_acronyms",
    "split_case_transitions",
    "strip_punctuation",
    "to_kebab_case",
]
