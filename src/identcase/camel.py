"""Simple camelCase conversion."""

from __future__ import annotations

import re

from identcase.errors import ActionableError

_SEPARATOR_THEN_CHAR = re.compile(r"[_\-\s]+(.)?")
_LEADING_UPPER = re.compile(r"^[A-Z]")


def to_camel_case(text: object) -> str:
    """Convert *text* to camelCase.

    Lowercases the whole string, drops each run of ``_``, ``-`` and
    whitespace and uppercases the character after it.  No word
    segmentation happens, so existing camel humps are flattened.

    >>> to_camel_case("SCREEN_NAME")
    'screenName'
    >>> to_camel_case("first name")
    'firstName'
    """
    if not isinstance(text, str):
        raise ActionableError.type_kind("to_camel_case", text)

    result = _SEPARATOR_THEN_CHAR.sub(
        lambda m: m.group(1).upper() if m.group(1) else "",
        text.lower(),
    )
    return _LEADING_UPPER.sub(lambda m: m.group(0).lower(), result)
