"""Registry of providers grouped by capability family.

The registry is populated once, during process start, through
:func:`initialize`. It is frozen afterwards and shared read-only between
concurrent resolution requests. Lookups never raise: a missing key means
"no provider resolved" and callers fail open.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from ..domain.models import ProviderDescriptor, ProviderFamily
from ..exceptions import DuplicateProviderError, RegistryError
from ..providers.providers_base import DataListProvider

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ProviderRegistry:
    """In-memory map of ``(family, key)`` to provider instances."""

    providers: dict[ProviderFamily, dict[str, DataListProvider]] = field(default_factory=dict)
    descriptors: dict[ProviderFamily, dict[str, ProviderDescriptor]] = field(
        default_factory=dict
    )
    frozen: bool = False

    def register(self, family: ProviderFamily | str, provider: DataListProvider) -> None:
        """Register ``provider`` under ``family``; duplicate keys are fatal."""

        family = ProviderFamily(family)
        if self.frozen:
            raise RegistryError("registry is frozen; register providers during initialize()")
        if provider.family is not family:
            raise RegistryError(
                f"provider '{provider.key}' belongs to '{provider.family.value}', "
                f"not '{family.value}'"
            )

        bucket = self.providers.setdefault(family, {})
        if provider.key in bucket:
            raise DuplicateProviderError(family.value, provider.key)

        descriptor = provider.describe()
        bucket[provider.key] = provider
        self.descriptors.setdefault(family, {})[provider.key] = descriptor
        logger.debug(
            "registry.provider.registered",
            extra={"family": family.value, "key": provider.key},
        )

    def register_all(self, providers: Iterable[DataListProvider]) -> None:
        for provider in providers:
            self.register(provider.family, provider)

    def freeze(self) -> None:
        """Mark the registry read-only."""

        self.frozen = True

    def get(self, family: ProviderFamily | str, key: str | None) -> DataListProvider | None:
        """Return the provider registered for ``key`` or ``None``."""

        if key is None:
            return None
        return self.providers.get(ProviderFamily(family), {}).get(key)

    def describe(self, family: ProviderFamily | str, key: str) -> ProviderDescriptor | None:
        return self.descriptors.get(ProviderFamily(family), {}).get(key)

    def list(self, family: ProviderFamily | str) -> list[ProviderDescriptor]:
        """Return descriptors in registration order."""

        return [*self.descriptors.get(ProviderFamily(family), {}).values()]

    def snapshot(self) -> Mapping[ProviderFamily, tuple[str, ...]]:
        """Immutable snapshot of registered keys per family."""

        return {family: tuple(bucket) for family, bucket in self.providers.items()}


_registry: ProviderRegistry | None = None


def initialize(providers: Iterable[DataListProvider]) -> ProviderRegistry:
    """Build, freeze and install the process-wide registry.

    Raises :class:`DuplicateProviderError` when two providers share a key
    within a family; startup must not continue in that case.
    """

    global _registry

    registry = ProviderRegistry()
    registry.register_all(providers)
    registry.freeze()
    _registry = registry
    logger.info(
        "registry.initialized",
        extra={family.value: len(keys) for family, keys in registry.snapshot().items()},
    )
    return registry


def get_registry() -> ProviderRegistry:
    """Return the registry installed by :func:`initialize`."""

    if _registry is None:
        raise RegistryError("provider registry is not initialized; call initialize() first")
    return _registry


def reset_registry() -> None:
    """Drop the process-wide registry."""

    global _registry
    _registry = None


__all__ = [
    "ProviderRegistry",
    "get_registry",
    "initialize",
    "reset_registry",
]
