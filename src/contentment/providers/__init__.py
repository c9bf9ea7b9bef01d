"""Pluggable providers: data sources, list editors, converters and display modes."""

from .providers_base import (
    ContentBlocksDisplayMode,
    DataListEditor,
    DataListProvider,
    DataListSource,
    DataListValueConverter,
)
from .providers_enum import EnumDataListSource, ImportlibModuleLoader, LoadedEnumCatalog
from .providers_factory import default_providers

__all__ = [
    "ContentBlocksDisplayMode",
    "DataListEditor",
    "DataListProvider",
    "DataListSource",
    "DataListValueConverter",
    "EnumDataListSource",
    "ImportlibModuleLoader",
    "LoadedEnumCatalog",
    "default_providers",
]
