"""Resolution of persisted data list configuration into runtime configuration.

``resolve`` turns the loosely typed blob stored for a property into the flat
mapping consumed by the front-end list editor:

* the selected data source is looked up and invoked; its items land under
  ``items`` as plain mappings (always present, empty when nothing resolves);
* the selected list editor's user configuration is merged next, followed by
  the editor's own defaults, first writer wins.

Lookup misses and provider failures are soft: they remove a feature, they
never abort resolution. Only structurally corrupt configuration raises
:class:`~src.contentment.exceptions.ConfigurationError`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..domain.models import (
    DataListItem,
    ErrorEvent,
    ProviderFamily,
    RawConfiguration,
    ResolvedConfiguration,
    SelectionEntry,
)
from ..exceptions import ConfigurationError, ensure_mapping
from ..plugins.base import ErrorSink
from ..providers.providers_base import (
    DataListEditor,
    DataListSource,
    DataListValueConverter,
)
from .error_sink import LoggingErrorSink
from .merge import merge_defaults
from .normalizer import to_selection_entry
from .registry import ProviderRegistry

logger = logging.getLogger(__name__)

ITEMS = "items"


def first_selection(raw: Mapping[str, Any], field_key: str) -> SelectionEntry | None:
    """Return the normalized first entry stored under ``field_key``.

    Absent or empty fields yield ``None``; anything not shaped as a list of
    selection objects raises :class:`ConfigurationError`.
    """

    entries = raw.get(field_key)
    if entries is None:
        return None
    if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
        raise ConfigurationError(
            f"expected a list of selections, got {type(entries).__name__}", path=field_key
        )
    if not entries:
        return None
    return to_selection_entry(entries[0], path=f"{field_key}[0]")


@dataclass(slots=True)
class ConfigurationResolver:
    """Resolve raw configuration against a provider registry."""

    registry: ProviderRegistry
    error_sink: ErrorSink = field(default_factory=LoggingErrorSink)

    def resolve(self, raw: RawConfiguration) -> ResolvedConfiguration:
        """Build the JSON-ready runtime configuration for one property instance."""

        config = ensure_mapping(raw, path="$")
        resolved: ResolvedConfiguration = {
            ITEMS: [item.as_dict() for item in self._resolve_items(config)]
        }

        editor_selection = first_selection(config, ProviderFamily.LIST_EDITOR.value)
        if editor_selection is not None:
            editor = self.registry.get(ProviderFamily.LIST_EDITOR, editor_selection.key)
            if isinstance(editor, DataListEditor):
                resolved = merge_defaults(
                    resolved, editor_selection.value, editor.default_config
                )
            else:
                logger.info(
                    "datalist.resolve.editor_missing",
                    extra={"key": editor_selection.key},
                )

        return resolved

    def resolve_items(self, raw: RawConfiguration) -> list[DataListItem]:
        """Materialise only the data source items of ``raw``."""

        return self._resolve_items(ensure_mapping(raw, path="$"))

    def convert(self, raw: RawConfiguration, value: Any) -> Any:
        """Convert a stored ``value`` with the configured value converter.

        Without a converter the value is returned as a string. A failing
        converter is reported and the string value is returned instead.
        """

        config = ensure_mapping(raw, path="$")
        fallback = None if value is None else str(value)

        selection = first_selection(config, ProviderFamily.VALUE_CONVERTER.value)
        if selection is None:
            return fallback

        converter = self.registry.get(ProviderFamily.VALUE_CONVERTER, selection.key)
        if not isinstance(converter, DataListValueConverter) or value is None:
            return fallback

        try:
            return converter.convert(value, selection.value)
        except Exception as exc:
            self.error_sink.report(
                ErrorEvent(source=f"{ProviderFamily.VALUE_CONVERTER.value}:{selection.key}", error=exc)
            )
            return fallback

    def _resolve_items(self, config: Mapping[str, Any]) -> list[DataListItem]:
        selection = first_selection(config, ProviderFamily.DATA_SOURCE.value)
        if selection is None:
            return []

        source = self.registry.get(ProviderFamily.DATA_SOURCE, selection.key)
        if not isinstance(source, DataListSource):
            logger.info("datalist.resolve.source_missing", extra={"key": selection.key})
            return []

        try:
            return list(source.get_items(selection.value))
        except Exception as exc:
            self.error_sink.report(
                ErrorEvent(source=f"{ProviderFamily.DATA_SOURCE.value}:{selection.key}", error=exc)
            )
            return []


def resolve(
    raw: RawConfiguration,
    registry: ProviderRegistry,
    error_sink: ErrorSink | None = None,
) -> ResolvedConfiguration:
    """Resolve ``raw`` against ``registry`` with a one-off resolver."""

    resolver = ConfigurationResolver(registry, error_sink or LoggingErrorSink())
    return resolver.resolve(raw)


__all__ = ["ConfigurationResolver", "first_selection", "resolve"]
