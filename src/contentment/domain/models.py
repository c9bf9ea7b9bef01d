"""Domain models for the data list configuration engine.

The module exposes lightweight frozen dataclasses describing providers,
their editable settings and the items a data source materialises. Raw and
resolved configuration stay plain mappings: provider sub-configuration is
opaque to the engine and validated by each provider.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, TypeAlias

RawConfiguration: TypeAlias = Mapping[str, Any]
ResolvedConfiguration: TypeAlias = dict[str, Any]


class ProviderFamily(str, Enum):
    """Capability families a provider can be registered under.

    The values double as the field keys used in persisted configuration.
    """

    DATA_SOURCE = "dataSource"
    LIST_EDITOR = "listEditor"
    VALUE_CONVERTER = "valueConverter"
    DISPLAY_MODE = "displayMode"


class OverlaySize(str, Enum):
    """Size of the overlay used to edit a provider's configuration."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True, slots=True)
class ConfigurationField:
    """One editable setting exposed by a provider."""

    key: str
    label: str
    description: str = ""
    renderer: str = ""
    renderer_config: Mapping[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "description": self.description,
            "renderer": self.renderer,
            "rendererConfig": dict(self.renderer_config),
        }


@dataclass(frozen=True, slots=True)
class ProviderDescriptor:
    """Static identity of a provider, built once when the registry is populated."""

    key: str
    name: str
    description: str
    icon: str
    fields: tuple[ConfigurationField, ...] = ()
    default_config: Mapping[str, Any] = field(default_factory=dict)
    view: str | None = None
    overlay_size: OverlaySize = OverlaySize.MEDIUM

    def as_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "fields": [item.as_dict() for item in self.fields],
            "defaultConfig": dict(self.default_config),
            "overlaySize": self.overlay_size.value,
        }


@dataclass(frozen=True, slots=True)
class SelectionEntry:
    """A persisted choice of one provider plus its sub-configuration."""

    key: str
    value: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class DataListItem:
    """Unit exposed to the rendered list."""

    name: str
    value: str
    description: str | None = None
    icon: str | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name, "value": self.value}
        if self.description is not None:
            payload["description"] = self.description
        if self.icon is not None:
            payload["icon"] = self.icon
        return payload


@dataclass(frozen=True, slots=True)
class ErrorEvent:
    """Payload handed to an error sink when a provider fails."""

    source: str
    error: BaseException


@dataclass(frozen=True, slots=True)
class ValueEditorSettings:
    """Settings for the content blocks value editor."""

    view: str
    hide_label: bool = False
    config: Mapping[str, Any] = field(default_factory=dict)


__all__ = [
    "ConfigurationField",
    "DataListItem",
    "ErrorEvent",
    "OverlaySize",
    "ProviderDescriptor",
    "ProviderFamily",
    "RawConfiguration",
    "ResolvedConfiguration",
    "SelectionEntry",
    "ValueEditorSettings",
]
