"""Configuration loading and validation.

Loads ``settings.toml`` and validates all fields before any example
table is read, so a typo in a log level or table path is reported up
front with the field that needs fixing.

The validated config is exposed as a :class:`Settings` dataclass with
typed fields for each section: ``logging`` and ``examples``.  Every
section is optional; a missing section takes the defaults below.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from identcase.errors import ActionableError

LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass
class LoggingConfig:
    """Logging settings from ``[logging]``."""

    level: str = "INFO"
    file_logging: bool = False
    log_dir: str = "data/logs"

    @property
    def level_number(self) -> int:
        return LOG_LEVELS[self.level]


@dataclass
class ExamplesConfig:
    """Example-runner settings from ``[examples]``."""

    tables: list[str] = field(default_factory=list)
    include_defaults: bool = True


@dataclass
class Settings:
    """Top-level validated configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    examples: ExamplesConfig = field(default_factory=ExamplesConfig)


# ---------------------------------------------------------------------------
# Default settings path
# ---------------------------------------------------------------------------

DEFAULT_SETTINGS_PATH = Path("config/settings.toml")


# ---------------------------------------------------------------------------
# Loading and validation
# ---------------------------------------------------------------------------


def load_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> Settings:
    """Load and validate settings from a TOML file.

    Raises :class:`~identcase.errors.ActionableError`:
      - CONFIG if the file is missing or a section is not a table
      - VALIDATION if field values are out of range
      - PARSE if the TOML is malformed

    Returns a fully validated :class:`Settings` instance.
    """
    filepath = Path(path)
    if not filepath.exists():
        raise ActionableError.config(
            field_name="settings_path",
            reason=f"Settings file not found: {filepath}",
            suggestion=f"Create {filepath} or copy from config/settings.toml",
        )

    try:
        raw_text = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ActionableError.from_exception(exc, str(filepath), "load") from None

    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ActionableError.parse(
            source=str(filepath),
            raw_error=str(exc),
        ) from None

    return _validate(data, filepath)


def _validate(data: dict[str, object], filepath: Path) -> Settings:
    """Validate raw TOML data and return a Settings instance."""

    # -- logging section -----------------------------------------------------
    logging_data = _optional_section(data, "logging", filepath)

    level = str(logging_data.get("level", "INFO")).upper()
    if level not in LOG_LEVELS:
        raise ActionableError.validation(
            field_name="logging.level",
            reason=f"'{level}' is not one of {', '.join(LOG_LEVELS)}",
            suggestion="Set [logging].level to DEBUG, INFO, WARNING or ERROR",
        )

    file_logging = logging_data.get("file_logging", False)
    if not isinstance(file_logging, bool):
        raise ActionableError.validation(
            field_name="logging.file_logging",
            reason=f"must be true or false, not {file_logging!r}",
        )

    logging_config = LoggingConfig(
        level=level,
        file_logging=file_logging,
        log_dir=str(logging_data.get("log_dir", "data/logs")),
    )

    # -- examples section ----------------------------------------------------
    examples_data = _optional_section(data, "examples", filepath)

    tables = examples_data.get("tables", [])
    if not isinstance(tables, list) or not all(isinstance(t, str) for t in tables):
        raise ActionableError.validation(
            field_name="examples.tables",
            reason="must be a list of file paths",
            suggestion='Set [examples].tables to a list such as ["config/examples.toml"]',
        )

    include_defaults = examples_data.get("include_defaults", True)
    if not isinstance(include_defaults, bool):
        raise ActionableError.validation(
            field_name="examples.include_defaults",
            reason=f"must be true or false, not {include_defaults!r}",
        )

    examples_config = ExamplesConfig(tables=list(tables), include_defaults=include_defaults)

    return Settings(logging=logging_config, examples=examples_config)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _optional_section(data: dict[str, object], name: str, filepath: Path) -> dict[str, object]:
    """Return a top-level section or ``{}``; raise CONFIG if it is not a table."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ActionableError.config(
            field_name=name,
            reason=f"[{name}] in {filepath} must be a table, not {type(section).__name__}",
            suggestion=f"Define [{name}] as a TOML table",
        )
    return section
