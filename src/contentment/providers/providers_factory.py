"""Factory for the closed set of providers registered at startup."""

from __future__ import annotations

from ..plugins.base import ErrorSink, ModuleLoader
from .providers_base import DataListProvider
from .providers_converters import EnumValueConverter, IntegerValueConverter
from .providers_display_modes import BlocksDisplayMode, CardsDisplayMode
from .providers_editors import (
    CheckboxListDataListEditor,
    DropdownListDataListEditor,
    RadioButtonListDataListEditor,
)
from .providers_enum import EnumDataListSource, ImportlibModuleLoader
from .providers_static import UserDefinedDataListSource


def default_providers(
    *,
    error_sink: ErrorSink,
    loader: ModuleLoader | None = None,
    enum_sort_default: bool = False,
) -> list[DataListProvider]:
    """Instantiate every built-in provider, in listing order."""
    loader = loader or ImportlibModuleLoader()
    return [
        EnumDataListSource(error_sink=error_sink, loader=loader, sort_default=enum_sort_default),
        UserDefinedDataListSource(),
        DropdownListDataListEditor(),
        CheckboxListDataListEditor(),
        RadioButtonListDataListEditor(),
        EnumValueConverter(loader=loader),
        IntegerValueConverter(),
        BlocksDisplayMode(),
        CardsDisplayMode(),
    ]
