"""Unit tests for the activity generation service."""

from datetime import date

from activity_template.core.config import ModuleConfig, RenderConfig
from activity_template.core.exceptions import RenderError
from activity_template.models import ArtifactKind
from activity_template.services.generation import (
    ActivityTemplateService,
    ModuleLayout,
    build_plan,
    format_creation_date,
)
from activity_template.services.generation import service as generation_service


class TestFormatCreationDate:
    """Tests for the creation date format."""

    def test_long_form(self):
        """Test the weekday, month, day, year format."""
        assert format_creation_date(date(2026, 10, 19)) == "Monday, October 19, 2026"

    def test_day_is_not_zero_padded(self):
        """Test single-digit days are not padded."""
        assert format_creation_date(date(2024, 3, 5)) == "Tuesday, March 5, 2024"


class TestBuildPlan:
    """Tests for plan building."""

    def test_with_layout(self, request_with_layout):
        """Test that manifest, source and layout are planned in order."""
        plan = build_plan(request_with_layout)

        assert [a.kind for a in plan.artifacts] == [
            ArtifactKind.MANIFEST,
            ArtifactKind.SOURCE,
            ArtifactKind.LAYOUT,
        ]

        manifest = plan.get(ArtifactKind.MANIFEST)
        assert manifest.relative_path == "src/main/AndroidManifest.xml"
        assert manifest.merge is True
        assert manifest.open_in_editor is False
        assert "<intent-filter>" in manifest.content

        source = plan.get(ArtifactKind.SOURCE)
        assert source.relative_path == "src/main/kotlin/com/example/app/MainActivity.kt"
        assert "MainActivityBinding" in source.content

        layout = plan.get(ArtifactKind.LAYOUT)
        assert layout.relative_path == "src/main/res/layout/activity_main.xml"
        assert 'type="com.example.app.MainActivity"' in layout.content

        assert plan.files_to_open == [source.relative_path, layout.relative_path]

    def test_without_layout(self, request_without_layout):
        """Test that no layout is planned and only the source is opened."""
        plan = build_plan(request_without_layout)

        assert len(plan.artifacts) == 2
        assert plan.get(ArtifactKind.LAYOUT) is None
        assert "setContent {" in plan.get(ArtifactKind.SOURCE).content
        assert "<intent-filter>" not in plan.get(ArtifactKind.MANIFEST).content
        assert plan.files_to_open == ["src/main/kotlin/com/example/app/SettingsActivity.kt"]

    def test_custom_module_layout(self, request_with_layout):
        """Test that target paths follow the module directories."""
        module = ModuleLayout.from_config(
            ModuleConfig(source_root="app/src/main/java", resource_root="app/src/main/res", manifest_dir="app/src/main")
        )
        plan = build_plan(request_with_layout, module)

        assert plan.get(ArtifactKind.SOURCE).relative_path == "app/src/main/java/com/example/app/MainActivity.kt"
        assert plan.get(ArtifactKind.LAYOUT).relative_path == "app/src/main/res/layout/activity_main.xml"
        assert plan.get(ArtifactKind.MANIFEST).relative_path == "app/src/main/AndroidManifest.xml"


class TestActivityTemplateService:
    """Tests for ActivityTemplateService."""

    def test_generate_success(self, request_with_layout):
        """Test a successful generation result."""
        service = ActivityTemplateService(RenderConfig(author="Kim"))
        result = service.generate(request_with_layout)

        assert result.success
        assert result.error is None
        assert result.metadata["files"] == 3
        assert "Created by Kim on" in result.data.get(ArtifactKind.SOURCE).content

    def test_generate_failure_is_reported(self, request_with_layout, monkeypatch):
        """Test that template errors become a failed result."""

        def broken_plan(*args, **kwargs):
            raise RenderError(message="boom", template_name="AndroidManifest.xml")

        monkeypatch.setattr(generation_service, "build_plan", broken_plan)
        result = ActivityTemplateService().generate(request_with_layout)

        assert not result.success
        assert result.data is None
        assert "boom" in result.error
        assert "AndroidManifest.xml" in result.error
