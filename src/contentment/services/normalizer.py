"""Migration of persisted selection entries to the current schema.

Early releases persisted the chosen provider under ``type``; it was later
renamed to ``key``. Entries are upgraded on read, never written back.
"""

from __future__ import annotations

import copy
from typing import Any

from ..domain.models import SelectionEntry
from ..exceptions import ConfigurationError, ensure_mapping

CURRENT_KEY = "key"
LEGACY_KEY = "type"
VALUE = "value"


def normalize_selection(entry: Any, *, path: str = "$") -> dict[str, Any]:
    """Return a copy of ``entry`` guaranteed to carry ``key``.

    A present ``key`` is left alone, even next to a stray ``type``.
    """

    mapping = ensure_mapping(entry, path=path)
    normalized = dict(mapping)

    if CURRENT_KEY not in normalized and LEGACY_KEY in normalized:
        normalized[CURRENT_KEY] = normalized.pop(LEGACY_KEY)

    if CURRENT_KEY not in normalized:
        raise ConfigurationError(f"selection has neither '{CURRENT_KEY}' nor '{LEGACY_KEY}'", path=path)
    if not isinstance(normalized[CURRENT_KEY], str):
        raise ConfigurationError(
            f"'{CURRENT_KEY}' must be a string, got {type(normalized[CURRENT_KEY]).__name__}",
            path=f"{path}.{CURRENT_KEY}",
        )
    return normalized


def to_selection_entry(entry: Any, *, path: str = "$") -> SelectionEntry:
    """Normalize ``entry`` and validate its ``value`` sub-configuration."""

    normalized = normalize_selection(entry, path=path)
    value = normalized.get(VALUE)
    if value is None:
        value = {}
    value = ensure_mapping(value, path=f"{path}.{VALUE}")
    return SelectionEntry(key=normalized[CURRENT_KEY], value=copy.deepcopy(dict(value)))


__all__ = ["normalize_selection", "to_selection_entry"]
