"""
Kotlin source file for the new activity.

Two shapes are produced depending on the layout choice: a Compose activity that
builds its UI in code, or a data-binding activity bound to the generated layout.
"""

from __future__ import annotations

from ..core.config import RenderConfig
from ..core.validation import require
from ..models.request import LayoutChoice, WithLayout, WithoutLayout
from ..naming import escape_kotlin_identifier
from ..templates import BINDING_ACTIVITY_TEMPLATE, COMPOSE_ACTIVITY_TEMPLATE, render_template


def render_source(
    date: str,
    package_name: str,
    activity_name: str,
    layout: LayoutChoice | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render the activity source file.

    Args:
        date: Pre-formatted creation date, inserted verbatim in the header
        package_name: Package of the activity
        activity_name: Activity class name, used verbatim
        layout: WithLayout to bind a generated layout, WithoutLayout (default) for Compose
        config: Fixed rendering values; defaults are used when omitted

    Returns:
        Kotlin source text
    """
    require(date=date, package_name=package_name, activity_name=activity_name)
    config = config or RenderConfig()
    layout = layout or WithoutLayout()

    context = {
        "date": date,
        "package": escape_kotlin_identifier(package_name),
        "activity_name": activity_name,
        "app_package": config.app_package,
        "base_activity": config.base_activity,
        "author": config.author,
    }

    if isinstance(layout, WithLayout):
        return render_template(
            BINDING_ACTIVITY_TEMPLATE,
            binding_class=layout.binding_class,
            layout_name=layout.layout_name,
            **context,
        )
    return render_template(
        COMPOSE_ACTIVITY_TEMPLATE,
        container_color=config.container_color,
        **context,
    )


def render_source_without_layout(
    date: str, package_name: str, activity_name: str, config: RenderConfig | None = None
) -> str:
    """Render a Compose activity that composes its UI in code."""
    return render_source(date, package_name, activity_name, WithoutLayout(), config)


def render_source_with_layout(
    date: str,
    package_name: str,
    activity_name: str,
    layout_name: str,
    config: RenderConfig | None = None,
) -> str:
    """Render a data-binding activity bound to ``layout_name``."""
    return render_source(date, package_name, activity_name, WithLayout(layout_name=layout_name), config)
