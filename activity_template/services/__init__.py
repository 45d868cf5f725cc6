"""Services package for activity-template."""

from .generation import ActivityTemplateService

__all__ = [
    "ActivityTemplateService",
]
