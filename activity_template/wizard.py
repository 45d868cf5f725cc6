"""
Wizard template descriptor.

Describes the "Custom Activity" wizard without any UI toolkit: where it is
offered, which parameters it collects, their defaults, constraints and
visibility rules, and how the activity and layout names suggest each other.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, PrivateAttr

from .models.request import GenerationRequest
from .naming import activity_name_from_layout, layout_name_from_activity


class Category(str, Enum):
    """Menu category the template is listed under."""

    ACTIVITY = "Activity"
    FRAGMENT = "Fragment"
    APPLICATION = "Application"
    OTHER = "Other"


class FormFactor(str, Enum):
    """Device families a template targets."""

    MOBILE = "Mobile"
    WEAR = "Wear"
    TV = "Tv"
    AUTOMOTIVE = "Automotive"
    GENERIC = "Generic"


class WizardUiContext(str, Enum):
    """Places in the IDE where the template is offered."""

    ACTIVITY_GALLERY = "ActivityGallery"
    MENU_ENTRY = "MenuEntry"
    NEW_PROJECT = "NewProject"
    NEW_MODULE = "NewModule"


class Constraint(str, Enum):
    """Checks the host applies to a parameter value."""

    ACTIVITY = "activity"
    LAYOUT = "layout"
    NONEMPTY = "nonempty"
    UNIQUE = "unique"
    PACKAGE = "package"


class Widget(str, Enum):
    """Input widget used for a parameter."""

    TEXT_FIELD = "text_field"
    CHECK_BOX = "check_box"
    PACKAGE_NAME = "package_name"


class Parameter(BaseModel):
    """A single wizard input."""

    key: str = Field(description="Field name on WizardState")
    label: str = Field(description="Label shown next to the widget")
    widget: Widget
    default: str | bool | None = Field(default=None)
    constraints: list[Constraint] = Field(default_factory=list)
    help: str | None = Field(default=None)
    visible_when: str | None = Field(
        default=None, description="Boolean parameter that must be set for this one to show"
    )
    suggested_from: str | None = Field(
        default=None, description="Parameter whose value drives the suggested default"
    )


class TemplateDescriptor(BaseModel):
    """Metadata and parameters of a wizard template."""

    name: str
    description: str
    min_api: int = Field(ge=1)
    category: Category
    form_factor: FormFactor
    screens: list[WizardUiContext]
    parameters: list[Parameter]

    def get_parameter(self, key: str) -> Parameter | None:
        """Get a parameter by key."""
        for parameter in self.parameters:
            if parameter.key == key:
                return parameter
        return None


ACTIVITY_TEMPLATE = TemplateDescriptor(
    name="Custom Activity",
    description="Creates a new activity",
    min_api=26,
    category=Category.ACTIVITY,
    form_factor=FormFactor.MOBILE,
    screens=[
        WizardUiContext.ACTIVITY_GALLERY,
        WizardUiContext.MENU_ENTRY,
        WizardUiContext.NEW_PROJECT,
        WizardUiContext.NEW_MODULE,
    ],
    parameters=[
        Parameter(
            key="activity_name",
            label="Activity Name",
            widget=Widget.TEXT_FIELD,
            default="MainActivity",
            constraints=[Constraint.ACTIVITY, Constraint.NONEMPTY],
            suggested_from="layout_name",
        ),
        Parameter(
            key="generate_layout",
            label="Generate a Layout File",
            widget=Widget.CHECK_BOX,
            default=True,
        ),
        Parameter(
            key="layout_name",
            label="Layout Name",
            widget=Widget.TEXT_FIELD,
            default="activity_main",
            constraints=[Constraint.LAYOUT, Constraint.NONEMPTY, Constraint.UNIQUE],
            visible_when="generate_layout",
            suggested_from="activity_name",
        ),
        Parameter(
            key="is_launcher",
            label="Launcher Activity",
            widget=Widget.CHECK_BOX,
            default=False,
            help="If true, this activity will have a CATEGORY_LAUNCHER intent filter.",
        ),
        Parameter(
            key="package_name",
            label="Package name",
            widget=Widget.PACKAGE_NAME,
            constraints=[Constraint.PACKAGE],
        ),
    ],
)


class WizardState(BaseModel):
    """Current parameter values while the wizard is open.

    Editing the activity name re-suggests the layout name and vice versa, until
    the user edits the suggested field directly.
    """

    package_name: str
    activity_name: str = "MainActivity"
    generate_layout: bool = True
    layout_name: str = "activity_main"
    is_launcher: bool = False

    _overridden: set[str] = PrivateAttr(default_factory=set)

    def set_activity_name(self, value: str) -> None:
        self.activity_name = value
        self._overridden.add("activity_name")
        if "layout_name" not in self._overridden:
            self.layout_name = layout_name_from_activity(value)

    def set_layout_name(self, value: str) -> None:
        self.layout_name = value
        self._overridden.add("layout_name")
        if "activity_name" not in self._overridden:
            self.activity_name = activity_name_from_layout(value)

    def is_overridden(self, key: str) -> bool:
        return key in self._overridden

    def visible_parameters(self, template: TemplateDescriptor = ACTIVITY_TEMPLATE) -> list[Parameter]:
        """Parameters currently shown, in widget order."""
        return [
            p for p in template.parameters
            if p.visible_when is None or bool(getattr(self, p.visible_when))
        ]

    def to_request(self, creation_date: str) -> GenerationRequest:
        """Freeze the current values into a GenerationRequest."""
        return GenerationRequest(
            package_name=self.package_name,
            activity_name=self.activity_name,
            generate_layout=self.generate_layout,
            is_launcher=self.is_launcher,
            layout_name=self.layout_name,
            creation_date=creation_date,
        )
