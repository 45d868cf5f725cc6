"""
Core type definitions for activity-template.

Provides the result wrapper returned by services.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """Result wrapper for service operations.

    Provides a consistent return type that includes success/failure status,
    the result data, and any errors or warnings.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    warnings: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    duration_ms: float = 0.0

    @classmethod
    def ok(cls, data: T, **metadata: Any) -> ServiceResult[T]:
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def fail(cls, error: str, **metadata: Any) -> ServiceResult[T]:
        """Create a failed result."""
        return cls(success=False, error=error, metadata=metadata)

