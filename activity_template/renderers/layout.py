"""Data-binding layout resource for the new activity."""

from __future__ import annotations

from ..core.config import RenderConfig
from ..core.validation import require
from ..templates import LAYOUT_TEMPLATE, render_template


def render_layout(package_name: str, activity_name: str, config: RenderConfig | None = None) -> str:
    """Render a layout whose only content is an empty ConstraintLayout.

    The ``<data>`` section exposes the activity as the ``activity`` variable.
    """
    require(package_name=package_name, activity_name=activity_name)
    config = config or RenderConfig()
    return render_template(
        LAYOUT_TEMPLATE,
        activity_class=f"{package_name}.{activity_name}",
        background=config.layout_background,
    )
