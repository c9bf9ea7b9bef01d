"""Abstract provider definitions.

Every provider carries static identity (``key``, ``name``, ``description``,
``icon``), the settings it exposes for editing and an optional block of
default configuration. Concrete providers must keep no shared mutable
state: a single instance serves every resolution request.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any, ClassVar

from ..domain.models import (
    ConfigurationField,
    DataListItem,
    OverlaySize,
    ProviderDescriptor,
    ProviderFamily,
)
from ..exceptions import RegistryError


class DataListProvider(ABC):
    """Base interface shared by every provider family."""

    family: ClassVar[ProviderFamily]

    key: ClassVar[str]
    name: ClassVar[str]
    description: ClassVar[str] = ""
    icon: ClassVar[str] = "icon-science"
    view: ClassVar[str | None] = None
    overlay_size: ClassVar[OverlaySize] = OverlaySize.MEDIUM
    fields: ClassVar[Sequence[ConfigurationField]] = ()
    default_config: ClassVar[Mapping[str, Any]] = MappingProxyType({})

    def describe(self) -> ProviderDescriptor:
        """Build the immutable descriptor, rejecting duplicate field keys."""

        seen: set[str] = set()
        for item in self.fields:
            if item.key in seen:
                raise RegistryError(
                    f"provider '{self.key}' declares field '{item.key}' more than once"
                )
            seen.add(item.key)

        return ProviderDescriptor(
            key=self.key,
            name=self.name,
            description=self.description,
            icon=self.icon,
            fields=tuple(self.fields),
            default_config=MappingProxyType(dict(self.default_config)),
            view=self.view,
            overlay_size=self.overlay_size,
        )


class DataListSource(DataListProvider):
    """Provider producing the options of a list."""

    family = ProviderFamily.DATA_SOURCE

    @abstractmethod
    def get_items(self, config: Mapping[str, Any]) -> Iterable[DataListItem]:
        """Return items for ``config``; failures must degrade to no items."""


class DataListEditor(DataListProvider):
    """Provider describing how a list is rendered and edited."""

    family = ProviderFamily.LIST_EDITOR


class DataListValueConverter(DataListProvider):
    """Provider converting the stored value for consumption."""

    family = ProviderFamily.VALUE_CONVERTER

    @abstractmethod
    def convert(self, value: Any, config: Mapping[str, Any]) -> Any:
        """Convert a stored ``value`` according to ``config``."""


class ContentBlocksDisplayMode(DataListProvider):
    """Provider choosing how content blocks are laid out in the editor."""

    family = ProviderFamily.DISPLAY_MODE
