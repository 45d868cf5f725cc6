"""Boundary checks for required generation inputs."""

from __future__ import annotations

from typing import Any

from .exceptions import ConfigurationError


def require(**values: Any) -> None:
    """Fail fast when a required input is absent or blank.

    Raises:
        ConfigurationError: On the first value that is None or a blank string.
    """
    for name, value in values.items():
        if value is None:
            raise ConfigurationError(
                message="required value is missing", field_name=name, actual_value=value
            )
        if isinstance(value, str) and not value.strip():
            raise ConfigurationError(
                message="required value is blank", field_name=name, actual_value=value
            )
