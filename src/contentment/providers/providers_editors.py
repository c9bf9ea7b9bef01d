"""List editors shipped with the engine."""

from __future__ import annotations

from types import MappingProxyType

from ..domain.models import ConfigurationField
from .providers_base import DataListEditor

ALLOW_EMPTY = "allowEmpty"
CHECK_ALL = "checkAll"
SHOW_DESCRIPTIONS = "showDescriptions"
ORIENTATION = "orientation"

_SHOW_DESCRIPTIONS_FIELD = ConfigurationField(
    key=SHOW_DESCRIPTIONS,
    label="Show descriptions?",
    description="Select to display the description text of each item.",
    renderer="boolean",
)


class DropdownListDataListEditor(DataListEditor):
    """Select a single value from a dropdown list."""

    key = "dropdown"
    name = "Dropdown List"
    description = "Select a single value from a dropdown select list."
    icon = "icon-indent"
    view = "dropdown-list.html"
    fields = (
        ConfigurationField(
            key=ALLOW_EMPTY,
            label="Allow empty?",
            description="Enable to allow an empty option at the top of the dropdown list.",
            renderer="boolean",
        ),
    )
    default_config = MappingProxyType({ALLOW_EMPTY: True})


class CheckboxListDataListEditor(DataListEditor):
    """Select multiple values from a list of checkboxes."""

    key = "checkboxList"
    name = "Checkbox List"
    description = "Select multiple values from a list of checkboxes."
    icon = "icon-bulleted-list"
    view = "checkbox-list.html"
    fields = (
        ConfigurationField(
            key=CHECK_ALL,
            label="Check all?",
            description="Include a toggle button to select or deselect all the options.",
            renderer="boolean",
        ),
        _SHOW_DESCRIPTIONS_FIELD,
    )
    default_config = MappingProxyType({CHECK_ALL: False, SHOW_DESCRIPTIONS: True})


class RadioButtonListDataListEditor(DataListEditor):
    """Select a single value from a list of radio buttons."""

    key = "radioButtonList"
    name = "Radio Button List"
    description = "Select a single value from a list of radio buttons."
    icon = "icon-target"
    view = "radio-button-list.html"
    fields = (
        ConfigurationField(
            key=ORIENTATION,
            label="Orientation",
            description="Select the layout of the options.",
            renderer="radio-button-list.html",
            renderer_config={
                "items": [
                    {"name": "Horizontal", "value": "horizontal"},
                    {"name": "Vertical", "value": "vertical"},
                ],
            },
        ),
        _SHOW_DESCRIPTIONS_FIELD,
    )
    default_config = MappingProxyType({ORIENTATION: "vertical", SHOW_DESCRIPTIONS: True})


__all__ = [
    "CheckboxListDataListEditor",
    "DropdownListDataListEditor",
    "RadioButtonListDataListEditor",
]
