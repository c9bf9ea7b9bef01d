"""Domain layer exports."""

from .models import (
    ConfigurationField,
    DataListItem,
    ErrorEvent,
    OverlaySize,
    ProviderDescriptor,
    ProviderFamily,
    RawConfiguration,
    ResolvedConfiguration,
    SelectionEntry,
    ValueEditorSettings,
)

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
