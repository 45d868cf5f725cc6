"""
Configuration management for activity-template.

Provides centralized, type-safe configuration with environment variable overrides
and sensible defaults for the renderers and the CLI.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file if it exists (looks in cwd and parent directories)
load_dotenv()


class RenderConfig(BaseModel):
    """Fixed values baked into the generated artifacts."""

    app_package: str = Field(
        default="com.example.testapplication",
        description="Application package hosting R, databinding and the base activity",
    )
    base_activity: str = Field(default="BaseActivity", description="Base activity class name")
    author: str = Field(default="HOI", description="Author name in the source file header")
    layout_background: str = Field(default="#FFFFFF", description="Root container background")
    container_color: str = Field(
        default="contents_bg", description="Color resource used as the Scaffold container color"
    )

    model_config = {"frozen": True}


class ModuleConfig(BaseModel):
    """Default directories of the target Gradle module."""

    source_root: str = Field(default="src/main/kotlin", description="Kotlin source root")
    resource_root: str = Field(default="src/main/res", description="Android resource root")
    manifest_dir: str = Field(default="src/main", description="Directory holding AndroidManifest.xml")


class Config(BaseModel):
    """Root configuration for activity-template."""

    project_name: str = Field(default="activity-template", description="Project identifier")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    render: RenderConfig = Field(default_factory=RenderConfig)
    module: ModuleConfig = Field(default_factory=ModuleConfig)

    model_config = {"extra": "ignore"}

    @classmethod
    def from_env(cls) -> Config:
        """Create configuration from environment variables."""
        defaults = RenderConfig()
        return cls(
            log_level=os.environ.get("ACTIVITY_TEMPLATE_LOG_LEVEL", "INFO"),  # type: ignore
            render=RenderConfig(
                app_package=os.environ.get("ACTIVITY_TEMPLATE_APP_PACKAGE", defaults.app_package),
                base_activity=os.environ.get("ACTIVITY_TEMPLATE_BASE_ACTIVITY", defaults.base_activity),
                author=os.environ.get("ACTIVITY_TEMPLATE_AUTHOR", defaults.author),
                layout_background=os.environ.get(
                    "ACTIVITY_TEMPLATE_LAYOUT_BACKGROUND", defaults.layout_background
                ),
            ),
        )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()
