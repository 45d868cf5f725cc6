"""
Activity Generation Service.

Turns a GenerationRequest into a GenerationPlan: the rendered manifest fragment,
source file and optional layout, each paired with its target path in the module
and the action the host should take with it.
"""

from __future__ import annotations

import time
from datetime import date as Date

from pydantic import BaseModel, Field

from ...core.config import ModuleConfig, RenderConfig
from ...core.exceptions import ActivityTemplateError
from ...core.logging import bind_context, clear_context, get_logger
from ...core.types import ServiceResult
from ...models.artifacts import ArtifactKind, GeneratedArtifact, GenerationPlan
from ...models.request import GenerationRequest, WithLayout
from ...renderers import render_layout, render_manifest, render_source

logger = get_logger(__name__)


def format_creation_date(day: Date) -> str:
    """Format a date in long form, e.g. ``Monday, October 19, 2026``."""
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


class ModuleLayout(BaseModel):
    """Directories of the Gradle module receiving the generated files."""

    source_root: str = Field(default="src/main/kotlin", description="Kotlin source root")
    resource_root: str = Field(default="src/main/res", description="Android resource root")
    manifest_dir: str = Field(default="src/main", description="Directory holding AndroidManifest.xml")

    @classmethod
    def from_config(cls, config: ModuleConfig) -> ModuleLayout:
        """Create a layout from module configuration."""
        return cls(**config.model_dump())

    def source_dir(self, package_name: str) -> str:
        """Directory of the given package under the source root."""
        return f"{self.source_root}/{package_name.replace('.', '/')}"


def build_plan(
    request: GenerationRequest,
    module: ModuleLayout | None = None,
    config: RenderConfig | None = None,
) -> GenerationPlan:
    """Render every artifact for a request.

    The manifest fragment is always merged into the module manifest. The source
    file is always saved and opened; the layout only when one is requested.

    Args:
        request: Validated generation parameters
        module: Target module directories
        config: Fixed rendering values

    Returns:
        GenerationPlan with artifacts in manifest, source, layout order
    """
    module = module or ModuleLayout()
    layout = request.layout_choice

    artifacts = [
        GeneratedArtifact(
            kind=ArtifactKind.MANIFEST,
            relative_path=f"{module.manifest_dir}/AndroidManifest.xml",
            content=render_manifest(request.package_name, request.activity_name, request.is_launcher),
            merge=True,
        ),
        GeneratedArtifact(
            kind=ArtifactKind.SOURCE,
            relative_path=f"{module.source_dir(request.package_name)}/{request.activity_name}.kt",
            content=render_source(
                request.creation_date,
                request.package_name,
                request.activity_name,
                layout,
                config,
            ),
            open_in_editor=True,
        ),
    ]

    if isinstance(layout, WithLayout):
        artifacts.append(
            GeneratedArtifact(
                kind=ArtifactKind.LAYOUT,
                relative_path=f"{module.resource_root}/layout/{layout.layout_name}.xml",
                content=render_layout(request.package_name, request.activity_name, config),
                open_in_editor=True,
            )
        )

    return GenerationPlan(request=request, artifacts=artifacts)


class ActivityTemplateService:
    """Service for generating new activities.

    Renders the artifacts for a request without touching the filesystem;
    writing, merging and opening belong to the caller.
    """

    def __init__(self, config: RenderConfig | None = None, module: ModuleLayout | None = None) -> None:
        """Initialize the generation service.

        Args:
            config: Fixed rendering values
            module: Target module directories
        """
        self.config = config or RenderConfig()
        self.module = module or ModuleLayout()

    def generate(self, request: GenerationRequest) -> ServiceResult[GenerationPlan]:
        """Generate all artifacts for a new activity.

        Args:
            request: Validated generation parameters

        Returns:
            ServiceResult containing the GenerationPlan
        """
        start_time = time.perf_counter()
        bind_context(activity=request.qualified_activity_name)

        try:
            logger.info(
                "Generating activity",
                layout=request.layout_name if request.generate_layout else None,
                launcher=request.is_launcher,
            )

            plan = build_plan(request, self.module, self.config)

            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                "Activity generated",
                files=len(plan.artifacts),
                duration_ms=duration_ms,
            )

            result = ServiceResult.ok(plan, files=len(plan.artifacts))
            result.duration_ms = duration_ms
            return result

        except ActivityTemplateError as e:
            logger.error("Activity generation failed", error=str(e))
            return ServiceResult.fail(str(e))

        finally:
            clear_context()
