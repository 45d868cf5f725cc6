"""Core infrastructure components for activity-template."""

from .config import Config, ModuleConfig, RenderConfig, get_config
from .exceptions import ActivityTemplateError, ConfigurationError, RenderError
from .logging import bind_context, clear_context, get_logger, setup_logging
from .types import ServiceResult
from .validation import require

__all__ = [
    "Config",
    "ModuleConfig",
    "RenderConfig",
    "get_config",
    "ActivityTemplateError",
    "ConfigurationError",
    "RenderError",
    "bind_context",
    "clear_context",
    "get_logger",
    "setup_logging",
    "ServiceResult",
    "require",
]
