"""Activity generation service."""

from .service import ActivityTemplateService, ModuleLayout, build_plan, format_creation_date

__all__ = ["ActivityTemplateService", "ModuleLayout", "build_plan", "format_creation_date"]
