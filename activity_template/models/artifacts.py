"""
Generated artifact models.

These models describe what the host should do with each rendered document:
merge it into an existing file or save it, and whether to open it afterwards.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from .request import GenerationRequest


class ArtifactKind(str, Enum):
    """Kinds of generated documents."""

    MANIFEST = "manifest"
    SOURCE = "source"
    LAYOUT = "layout"


class GeneratedArtifact(BaseModel):
    """A rendered document and its target in the module."""

    kind: ArtifactKind
    relative_path: str = Field(description="Target path relative to the module root")
    content: str = Field(description="Rendered text")
    merge: bool = Field(default=False, description="Merge into the target instead of overwriting")
    open_in_editor: bool = Field(default=False, description="Open the target once written")


class GenerationPlan(BaseModel):
    """Ordered artifacts produced for one request."""

    request: GenerationRequest
    artifacts: list[GeneratedArtifact] = Field(default_factory=list)

    def get(self, kind: ArtifactKind) -> GeneratedArtifact | None:
        """Get the artifact of a given kind."""
        for artifact in self.artifacts:
            if artifact.kind == kind:
                return artifact
        return None

    @property
    def files_to_open(self) -> list[str]:
        """Targets to open in an editor, in generation order."""
        return [a.relative_path for a in self.artifacts if a.open_in_editor]
