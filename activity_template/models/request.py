"""
Generation request models.

A GenerationRequest carries the resolved wizard parameters for one rendering
pass. The layout choice is a tagged variant so the "with layout" and "without
layout" source file shapes are explicit.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, model_validator

from ..core.validation import require
from ..naming import binding_class_name


class WithoutLayout(BaseModel):
    """The activity composes its UI in code; no layout resource is generated."""

    kind: Literal["without_layout"] = "without_layout"

    model_config = {"frozen": True}


class WithLayout(BaseModel):
    """The activity binds to a generated layout resource."""

    kind: Literal["with_layout"] = "with_layout"
    layout_name: str = Field(description="Layout resource name, e.g. activity_main")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _check_layout_name(cls, data: Any) -> Any:
        if isinstance(data, dict):
            require(layout_name=data.get("layout_name"))
        return data

    @property
    def binding_class(self) -> str:
        """Name of the view binding class generated for the layout."""
        return binding_class_name(self.layout_name)


LayoutChoice = Annotated[Union[WithLayout, WithoutLayout], Field(discriminator="kind")]


class GenerationRequest(BaseModel):
    """Validated parameters for one activity generation."""

    package_name: str = Field(description="Dot-separated package of the new activity")
    activity_name: str = Field(description="Activity class name")
    generate_layout: bool = Field(default=True, description="Whether to generate a layout file")
    is_launcher: bool = Field(default=False, description="Whether to add a LAUNCHER intent filter")
    layout_name: str | None = Field(
        default="activity_main", description="Layout resource name, ignored without generate_layout"
    )
    creation_date: str = Field(description="Pre-formatted creation date for the source header")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _check_required(cls, data: Any) -> Any:
        if isinstance(data, dict):
            require(
                package_name=data.get("package_name"),
                activity_name=data.get("activity_name"),
                creation_date=data.get("creation_date"),
            )
            if data.get("generate_layout", True):
                require(layout_name=data.get("layout_name", "activity_main"))
        return data

    @property
    def layout_choice(self) -> WithLayout | WithoutLayout:
        """The layout variant selected by ``generate_layout``."""
        if self.generate_layout:
            return WithLayout(layout_name=self.layout_name)
        return WithoutLayout()

    @property
    def qualified_activity_name(self) -> str:
        """Fully qualified activity class name."""
        return f"{self.package_name}.{self.activity_name}"
