"""
Custom exception hierarchy for activity-template.

All exceptions inherit from ActivityTemplateError to enable consistent error
handling across renderers, the recipe and the CLI. Each exception type includes
context for debugging and logging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ActivityTemplateError(Exception):
    """Base exception for all activity-template errors."""

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        ctx = f" | context: {self.context}" if self.context else ""
        cause = f" | caused by: {self.cause}" if self.cause else ""
        return f"{self.message}{ctx}{cause}"


@dataclass
class ConfigurationError(ActivityTemplateError):
    """Raised when a required generation input is absent or blank."""

    field_name: str | None = None
    actual_value: Any = None

    def __str__(self) -> str:
        base = super().__str__()
        if self.field_name:
            return f"Invalid configuration for '{self.field_name}': {base}"
        return f"Invalid configuration: {base}"


@dataclass
class RenderError(ActivityTemplateError):
    """Raised when a template fails to render."""

    template_name: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        return f"[template: {self.template_name}] {base}"
