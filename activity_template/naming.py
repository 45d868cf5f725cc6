"""
Activity/layout naming conventions.

Derives the suggested layout resource name from an activity class name and back.
The two directions are only approximate inverses: they prefill wizard defaults
the user may override and never raise for oddly shaped input.
"""

from __future__ import annotations

import re

ACTIVITY_SUFFIX = "Activity"
LAYOUT_PREFIX = "activity_"
BINDING_SUFFIX = "Binding"

# Kotlin hard keywords; a package segment matching one must be backtick-quoted
KOTLIN_KEYWORDS = frozenset({
    "as", "break", "class", "continue", "do", "else", "false", "for", "fun", "if",
    "in", "interface", "is", "null", "object", "package", "return", "super", "this",
    "throw", "true", "try", "typealias", "typeof", "val", "var", "when", "while",
})

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def camel_case_to_underscores(text: str) -> str:
    """Convert CamelCase to lower_snake_case.

    Acronym runs stay together: ``HTTPClient`` becomes ``http_client``.
    """
    if not text:
        return text
    text = _ACRONYM_BOUNDARY.sub(r"\1_\2", text)
    text = _WORD_BOUNDARY.sub(r"\1_\2", text)
    return text.lower()


def underscores_to_camel_case(text: str) -> str:
    """Convert snake_case to PascalCase, dropping empty segments."""
    return "".join(part[:1].upper() + part[1:] for part in text.split("_") if part)


def layout_name_from_activity(activity_name: str) -> str:
    """Suggest a layout name for an activity, e.g. ``MainActivity`` -> ``activity_main``."""
    if not activity_name:
        return ""

    base = activity_name
    while base.endswith(ACTIVITY_SUFFIX):
        base = base[: -len(ACTIVITY_SUFFIX)]

    if not base:
        return LAYOUT_PREFIX.rstrip("_")
    return LAYOUT_PREFIX + camel_case_to_underscores(base).strip("_")


def activity_name_from_layout(layout_name: str) -> str:
    """Suggest an activity name for a layout, e.g. ``activity_main`` -> ``MainActivity``."""
    if not layout_name:
        return ""

    base = layout_name
    if base.startswith(LAYOUT_PREFIX):
        base = base[len(LAYOUT_PREFIX):]
    if base.endswith("_activity"):
        base = base[: -len("_activity")]
    if base == "activity":
        base = ""

    name = underscores_to_camel_case(base)
    if not name.endswith(ACTIVITY_SUFFIX):
        name += ACTIVITY_SUFFIX
    return name


def binding_class_name(layout_name: str) -> str:
    """Binding class imported for a layout, e.g. ``activity_main`` -> ``MainActivityBinding``."""
    return activity_name_from_layout(layout_name) + BINDING_SUFFIX


def escape_kotlin_identifier(identifier: str) -> str:
    """Backtick-quote the dotted segments of ``identifier`` that are Kotlin keywords."""
    return ".".join(
        f"`{segment}`" if segment in KOTLIN_KEYWORDS else segment
        for segment in identifier.split(".")
    )
