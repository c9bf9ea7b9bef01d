"""Domain level exceptions and helpers for the configuration engine."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = [
    "AppError",
    "ConfigurationError",
    "RegistryError",
    "DuplicateProviderError",
    "ensure_mapping",
]


class AppError(Exception):
    """Base class for application specific errors."""


class ConfigurationError(AppError):
    """Raised when persisted configuration is structurally corrupt.

    ``path`` points at the offending node, e.g. ``dataSource[0].value``.
    """

    def __init__(self, message: str, *, path: str | None = None) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)


class RegistryError(AppError):
    """Base class for provider registry failures."""


class DuplicateProviderError(RegistryError):
    """Raised when a provider key is registered twice within a family."""

    def __init__(self, family: str, key: str) -> None:
        self.family = family
        self.key = key
        super().__init__(f"provider '{key}' is already registered for family '{family}'")


def ensure_mapping(value: Any, *, path: str) -> Mapping[str, Any]:
    """Ensure ``value`` is a mapping, otherwise raise :class:`ConfigurationError`."""

    if not isinstance(value, Mapping):
        raise ConfigurationError(
            f"expected an object, got {type(value).__name__}", path=path
        )
    return value
