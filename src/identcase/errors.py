"""Actionable error hierarchy for identcase.

Errors are classified by **recovery path**, not by origin.
Each error type carries structured guidance for three audiences:
  - The calling code (typed ``error_type`` for routing)
  - The human caller (``suggestion`` + ``troubleshooting`` steps)
  - An AI agent (``ai_guidance`` with concrete next actions)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any


# ---------------------------------------------------------------------------
# Error classification
# ---------------------------------------------------------------------------


class ErrorType(StrEnum):
    """Recovery-path categories: what to *do*, not where it came from."""

    TYPE_KIND = "type_kind"
    MISSING_ARGUMENT = "missing_argument"
    INVALID_NUMBER = "invalid_number"
    CONFIG = "config"
    PARSE = "parse"
    VALIDATION = "validation"
    UNEXPECTED = "unexpected"


# ---------------------------------------------------------------------------
# Guidance dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AIGuidance:
    """Machine-readable guidance for an AI agent consuming this error."""

    action_required: str
    command: str | None = None
    checks: list[str] | None = None
    steps: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"action_required": self.action_required}
        if self.command is not None:
            result["command"] = self.command
        if self.checks is not None:
            result["checks"] = self.checks
        if self.steps is not None:
            result["steps"] = self.steps
        return result


@dataclass(frozen=True)
class Troubleshooting:
    """Sequential, human-readable recovery steps."""

    steps: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {"steps": self.steps}


# ---------------------------------------------------------------------------
# Base actionable error
# ---------------------------------------------------------------------------


@dataclass
class ActionableError(Exception):
    """Structured error with embedded recovery guidance.

    Use the factory classmethods rather than constructing directly;
    they encode domain knowledge so callers don't have to.
    """

    error: str
    error_type: ErrorType
    service: str

    success: bool = field(default=False, init=False)
    suggestion: str | None = None
    ai_guidance: AIGuidance | None = None
    troubleshooting: Troubleshooting | None = None
    context: dict[str, Any] | None = None
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    # Make it work as a real exception
    def __post_init__(self) -> None:
        super().__init__(self.error)

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Compact JSON-ready dict; ``None`` values are excluded."""
        result: dict[str, Any] = {
            "success": self.success,
            "error": self.error,
            "error_type": self.error_type.value,
            "service": self.service,
            "timestamp": self.timestamp,
        }
        if self.suggestion is not None:
            result["suggestion"] = self.suggestion
        if self.ai_guidance is not None:
            result["ai_guidance"] = self.ai_guidance.to_dict()
        if self.troubleshooting is not None:
            result["troubleshooting"] = self.troubleshooting.to_dict()
        if self.context is not None:
            result["context"] = self.context
        return result

    # -- factory methods -----------------------------------------------------

    @classmethod
    def type_kind(
        cls,
        operation: str,
        value: object,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """A text transform received something that is not a ``str``."""
        type_name = type(value).__name__
        return cls(
            error=f"{operation}: input must be text, got {type_name}",
            error_type=ErrorType.TYPE_KIND,
            service=operation,
            suggestion=suggestion or f"Pass a str to {operation}(), not {type_name}",
            ai_guidance=AIGuidance(
                action_required=f"Convert the argument to str before calling {operation}()",
                checks=[
                    f"Is a {type_name} being passed where text is expected?",
                    "Was a missing value (None) propagated from an earlier step?",
                ],
            ),
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Locate the call to {operation}()",
                    f"2. Check where the {type_name} argument comes from",
                    "3. Pass text (for example str(value)) or skip the call",
                ]
            ),
            context={"argument_type": type_name},
        )

    @classmethod
    def missing_argument(
        cls,
        operation: str,
        argument: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """A required argument was omitted or ``None``."""
        return cls(
            error=f"{operation}: argument '{argument}' must be provided and not None",
            error_type=ErrorType.MISSING_ARGUMENT,
            service=operation,
            suggestion=suggestion or f"Provide a value for '{argument}'",
            ai_guidance=AIGuidance(
                action_required=f"Supply '{argument}' when calling {operation}()",
                checks=[f"Is '{argument}' None because an upstream lookup failed?"],
            ),
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Locate the call to {operation}()",
                    f"2. Pass a value for '{argument}'",
                    "3. Retry",
                ]
            ),
            context={"argument": argument},
        )

    @classmethod
    def invalid_number(
        cls,
        operation: str,
        argument: str,
        value: object,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """An argument is not a finite real number."""
        shown = _short_repr(value)
        return cls(
            error=f"{operation}: argument '{argument}' must be a finite number, got {shown}",
            error_type=ErrorType.INVALID_NUMBER,
            service=operation,
            suggestion=suggestion or f"Pass an int or float for '{argument}' (not NaN or infinity)",
            ai_guidance=AIGuidance(
                action_required=f"Convert '{argument}' to a finite int or float",
                checks=[
                    "Is the value a numeric string that still needs parsing?",
                    "Did an earlier computation produce NaN or infinity?",
                ],
            ),
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Inspect the value passed as '{argument}': {shown}",
                    "2. Parse or validate it before the call",
                    "3. Retry",
                ]
            ),
            context={"argument": argument, "argument_type": type(value).__name__},
        )

    @classmethod
    def config(
        cls,
        field_name: str,
        reason: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Missing or invalid configuration in settings.toml."""
        return cls(
            error=f"Configuration error — {field_name}: {reason}",
            error_type=ErrorType.CONFIG,
            service="settings.toml",
            suggestion=suggestion or f"Fix '{field_name}' in config/settings.toml",
            ai_guidance=AIGuidance(
                action_required=f"Correct the '{field_name}' value in config/settings.toml",
                checks=[
                    "Verify config/settings.toml exists",
                    f"Verify '{field_name}' is present and valid",
                ],
            ),
            troubleshooting=Troubleshooting(
                steps=[
                    "1. Open config/settings.toml",
                    f"2. Locate the '{field_name}' setting",
                    f"3. Fix the issue: {reason}",
                    "4. Save and re-run",
                ]
            ),
        )

    @classmethod
    def parse(
        cls,
        source: str,
        raw_error: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """A TOML file (settings or example table) could not be parsed."""
        return cls(
            error=f"Parse failure in {source}: {raw_error}",
            error_type=ErrorType.PARSE,
            service=source,
            suggestion=suggestion or f"Fix the TOML syntax in {source}",
            ai_guidance=AIGuidance(
                action_required=f"Repair the syntax of {source}",
                checks=[
                    "Are all strings quoted?",
                    "Is every [[table]] header spelled correctly?",
                ],
            ),
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Open {source}",
                    f"2. Go to the location reported: {raw_error}",
                    "3. Fix the syntax and re-run",
                ]
            ),
        )

    @classmethod
    def validation(
        cls,
        field_name: str,
        reason: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Input validation failure (TOML values, CLI args, etc.)."""
        return cls(
            error=f"Validation error — {field_name}: {reason}",
            error_type=ErrorType.VALIDATION,
            service="validation",
            suggestion=suggestion or f"Fix '{field_name}': {reason}",
            ai_guidance=AIGuidance(
                action_required=f"Correct the value for '{field_name}'",
            ),
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Check the value of '{field_name}'",
                    f"2. Issue: {reason}",
                    "3. Correct and retry",
                ]
            ),
        )

    @classmethod
    def unexpected(
        cls,
        service: str,
        operation: str,
        raw_error: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Catch-all for truly unexpected failures."""
        return cls(
            error=f"Unexpected error in {service} during {operation}: {raw_error}",
            error_type=ErrorType.UNEXPECTED,
            service=service,
            suggestion=suggestion or "This is an unexpected error — check logs for details",
            ai_guidance=AIGuidance(
                action_required="Analyze the error and escalate if needed",
                checks=["Check the full traceback in logs"],
            ),
        )

    @classmethod
    def from_exception(
        cls,
        error: Exception,
        service: str,
        operation: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Auto-classify an exception by type and keyword patterns.

        A caller-supplied ``suggestion`` is always preserved since it carries
        context the generic classifier cannot infer.
        """
        error_str = str(error).lower()
        raw_error = str(error)

        if isinstance(error, UnicodeDecodeError):
            return cls.parse(
                service,
                raw_error,
                suggestion=suggestion or f"Save {service} as UTF-8 text",
            )

        if isinstance(error, OSError) or any(
            kw in error_str for kw in ("not found", "no such")
        ):
            return cls.config(service, raw_error, suggestion=suggestion)

        if any(kw in error_str for kw in ("toml", "invalid statement", "expected")):
            return cls.parse(service, raw_error, suggestion=suggestion)

        return cls.unexpected(service, operation, raw_error, suggestion=suggestion)


def _short_repr(value: object, limit: int = 60) -> str:
    """``repr(value)`` cut to *limit* characters."""
    try:
        text = repr(value)
    except ValueError:
        # int too large for str conversion
        return f"<{type(value).__name__} too large to display>"
    return text if len(text) <= limit else f"{text[: limit - 3]}..."
