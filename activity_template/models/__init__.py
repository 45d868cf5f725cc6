"""Data models for activity-template."""

from .artifacts import ArtifactKind, GeneratedArtifact, GenerationPlan
from .request import GenerationRequest, LayoutChoice, WithLayout, WithoutLayout

__all__ = [
    "ArtifactKind",
    "GeneratedArtifact",
    "GenerationPlan",
    "GenerationRequest",
    "LayoutChoice",
    "WithLayout",
    "WithoutLayout",
]
