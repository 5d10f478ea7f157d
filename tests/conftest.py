"""Global test configuration: shared fixtures.

1. ``write_toml``: writes a TOML snippet under ``tmp_path`` and returns
   its path, for settings and example-table tests.

2. ``reset_logger`` (autouse): restores the package logger level after
   each test, since the CLI changes it from ``--log-level`` and
   ``[logging].level``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from identcase.logging import handler, logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture
def write_toml(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes *content* to ``tmp_path / name``."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """Put the logger back to INFO with only its stderr handler."""
    handlers = list(logger.handlers)
    yield
    logger.setLevel(logging.INFO)
    handler.setLevel(logging.INFO)
    for extra in [h for h in logger.handlers if h not in handlers]:
        logger.removeHandler(extra)
