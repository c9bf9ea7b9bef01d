"""Data source returning items entered by the editor."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from ..domain.models import ConfigurationField, DataListItem
from .providers_base import DataListSource

ITEMS = "items"


class UserDefinedDataListSource(DataListSource):
    """Manually enter the items of the list."""

    key = "userDefined"
    name = "User-defined List"
    description = "Manually configure the items for the data source."
    icon = "icon-bulleted-list"
    fields = (
        ConfigurationField(
            key=ITEMS,
            label="Options",
            description="Configure the option items for the data list.",
            renderer="data-table.html",
            renderer_config={
                "fields": [
                    {"key": "name", "label": "Label", "renderer": "textstring"},
                    {"key": "value", "label": "Value", "renderer": "textstring"},
                ],
            },
        ),
    )

    def get_items(self, config: Mapping[str, Any]) -> Iterator[DataListItem]:
        raw = config.get(ITEMS) or []
        if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
            raise ValueError(f"'{ITEMS}' must be a list, got {type(raw).__name__}")

        for entry in raw:
            if not isinstance(entry, Mapping):
                raise ValueError(f"item must be an object, got {type(entry).__name__}")
            value = entry.get("value")
            if value is None:
                continue
            yield DataListItem(
                name=str(entry.get("name") or value),
                value=str(value),
                description=entry.get("description"),
                icon=entry.get("icon"),
            )


__all__ = ["UserDefinedDataListSource"]
