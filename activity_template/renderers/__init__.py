"""Pure renderers for the generated activity artifacts."""

from .layout import render_layout
from .manifest import render_manifest
from .source import render_source, render_source_with_layout, render_source_without_layout

__all__ = [
    "render_layout",
    "render_manifest",
    "render_source",
    "render_source_with_layout",
    "render_source_without_layout",
]
