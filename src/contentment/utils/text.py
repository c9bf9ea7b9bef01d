"""Helpers turning identifier-style names into labels."""

from __future__ import annotations

import re
from typing import Any

_LOWER_TO_UPPER = re.compile(r"(?<=[a-z])(?=[A-Z])")


def split_pascal_casing(value: str, separator: str = " ") -> str:
    """Insert ``separator`` at each lower-to-upper letter transition.

    >>> split_pascal_casing("FirstName")
    'First Name'
    >>> split_pascal_casing("ID")
    'ID'
    """

    return _LOWER_TO_UPPER.sub(separator, value)


def to_first_upper(value: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""

    return value[:1].upper() + value[1:]


def to_bool(value: Any) -> bool:
    """Coerce persisted flags such as ``"1"`` or ``"true"`` to ``bool``."""

    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


__all__ = ["split_pascal_casing", "to_bool", "to_first_upper"]
