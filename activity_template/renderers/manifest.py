"""Manifest fragment declaring the new activity."""

from __future__ import annotations

from ..core.validation import require
from ..templates import MANIFEST_TEMPLATE, render_template


def render_manifest(package_name: str, activity_name: str, is_launcher: bool) -> str:
    """Render an AndroidManifest.xml fragment declaring one activity.

    A launcher activity is exported and carries a MAIN/LAUNCHER intent filter;
    any other activity is a self-closed, non-exported element. The host merges
    the fragment into the module manifest.

    Args:
        package_name: Package of the activity
        activity_name: Activity class name
        is_launcher: Whether the activity is a launcher entry point

    Returns:
        Manifest XML text
    """
    require(package_name=package_name, activity_name=activity_name, is_launcher=is_launcher)
    return render_template(
        MANIFEST_TEMPLATE,
        activity_class=f"{package_name}.{activity_name}",
        exported=str(bool(is_launcher)).lower(),
        is_launcher=bool(is_launcher),
    )
