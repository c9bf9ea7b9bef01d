"""Fields shown when an editor configures a data list property."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import AppConfig
from ..domain.models import ConfigurationField, ProviderDescriptor, ProviderFamily
from .merge import merge_defaults
from .registry import ProviderRegistry

CONFIGURATION_EDITOR_VIEW = "configuration-editor.html"
CONFIGURATION_EDITOR_OVERLAY_VIEW = "configuration-editor.overlay.html"

MAX_ITEMS = "maxItems"
DISABLE_SORTING = "disableSorting"
OVERLAY_VIEW = "overlayView"
ENABLE_DEV_MODE = "enableDevMode"
ITEMS = "items"

_FIELD_TEXT = {
    ProviderFamily.DATA_SOURCE: ("Data source", "Select and configure a data source."),
    ProviderFamily.LIST_EDITOR: ("List editor", "Select and configure a list editor."),
    ProviderFamily.VALUE_CONVERTER: (
        "Value converter",
        "<i>(Advanced)</i> Select and configure a value converter.<br><br>"
        "If no converter is configured, the returned value will be a default "
        "<code>string</code> value.",
    ),
}


def _editor_model(descriptor: ProviderDescriptor, config: AppConfig) -> dict[str, object]:
    model = descriptor.as_dict()
    if descriptor.view:
        model["view"] = config.resolve_view(descriptor.view)
    return model


@dataclass(slots=True)
class DataListConfigurationEditor:
    """Describe the data source, list editor and value converter pickers."""

    registry: ProviderRegistry
    config: AppConfig

    def default_editor_config(self) -> dict[str, object]:
        return {
            MAX_ITEMS: 1,
            DISABLE_SORTING: "1",
            OVERLAY_VIEW: self.config.resolve_view(CONFIGURATION_EDITOR_OVERLAY_VIEW),
            ENABLE_DEV_MODE: "1",
        }

    def fields(self) -> list[ConfigurationField]:
        view = self.config.resolve_view(CONFIGURATION_EDITOR_VIEW)
        defaults = self.default_editor_config()

        fields: list[ConfigurationField] = []
        for family, (label, description) in _FIELD_TEXT.items():
            models = [_editor_model(item, self.config) for item in self.registry.list(family)]
            fields.append(
                ConfigurationField(
                    key=family.value,
                    label=label,
                    description=description,
                    renderer=view,
                    renderer_config=merge_defaults({ITEMS: models}, defaults),
                )
            )
        return fields


__all__ = ["DataListConfigurationEditor"]
