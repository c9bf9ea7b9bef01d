"""First-writer-wins merge of partial configuration maps."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def merge_defaults(
    base: Mapping[str, Any] | None, *overrides: Mapping[str, Any] | None
) -> dict[str, Any]:
    """Merge ``overrides`` into a copy of ``base`` without overwriting keys.

    ``base`` wins over every override; among overrides, earlier ones win.
    Keys keep their first insertion position. ``None`` maps are skipped.
    """

    merged: dict[str, Any] = dict(base or {})
    for override in overrides:
        if not override:
            continue
        for key, value in override.items():
            if key not in merged:
                merged[key] = value
    return merged


__all__ = ["merge_defaults"]
