"""Enumeration data source backed by runtime type resolution.

The source is configured with ``enumType = [module, qualifiedName]`` and
emits one item per enum member. Loading a module or resolving a type is an
environmental concern (a module was removed, a type renamed), so every
failure is reported to the error sink and degrades to an empty list rather
than breaking the editor that hosts the list.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import sys
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import ModuleType
from typing import Any

from ..domain.models import ConfigurationField, DataListItem, ErrorEvent
from ..plugins.base import ErrorSink, ModuleLoader
from ..utils.text import split_pascal_casing, to_bool
from .providers_base import DataListSource

logger = logging.getLogger(__name__)

ENUM_TYPE = "enumType"
SORT_ALPHABETICALLY = "sortAlphabetically"


class ImportlibModuleLoader:
    """Resolve modules with :mod:`importlib` and enum types by attribute lookup."""

    def load_module(self, identifier: str) -> Any:
        return importlib.import_module(identifier)

    def resolve_type(self, module: Any, qualified_name: str) -> Any:
        prefix = f"{module.__name__}."
        name = qualified_name[len(prefix):] if qualified_name.startswith(prefix) else qualified_name
        target: Any = module
        for part in name.split("."):
            try:
                target = getattr(target, part)
            except AttributeError as exc:
                raise LookupError(
                    f"type '{qualified_name}' not found in module '{module.__name__}'"
                ) from exc
        return target

    def list_member_names(self, type_handle: Any) -> Sequence[str]:
        if not (inspect.isclass(type_handle) and issubclass(type_handle, Enum)):
            raise TypeError(f"{type_handle!r} is not an enumeration")
        # __members__ keeps declaration order and includes aliases
        return list(type_handle.__members__)


@dataclass(slots=True)
class LoadedEnumCatalog:
    """List enums declared in modules that are already imported.

    Modules are looked up in ``modules`` (``sys.modules`` by default) and never
    imported, so a listing request cannot trigger import side effects.
    """

    modules: Mapping[str, ModuleType] = field(default_factory=lambda: sys.modules)

    def list_enum_types(self, identifier: str) -> list[str]:
        module = self.modules.get(identifier)
        if module is None:
            raise LookupError(f"module '{identifier}' is not loaded")
        return sorted(
            f"{module.__name__}.{obj.__qualname__}"
            for _, obj in inspect.getmembers(module, inspect.isclass)
            if issubclass(obj, Enum) and obj is not Enum and obj.__module__ == module.__name__
        )


@dataclass(slots=True)
class EnumDataListSource(DataListSource):
    """Select an enum from a Python module as the data source."""

    key = "enum"
    name = "Enum"
    description = "Select an enum from a Python module as the data source."
    icon = "icon-indent"
    fields = (
        ConfigurationField(
            key=ENUM_TYPE,
            label="Enum",
            description="Select the enum from a module.",
            renderer="cascading-dropdown-list.html",
            renderer_config={"apis": ["/api/datalist/enums?module={0}"]},
        ),
        ConfigurationField(
            key=SORT_ALPHABETICALLY,
            label="Sort alphabetically",
            description=(
                "Select to sort the enum in alphabetical order.<br>"
                "By default, the order is defined by the enum itself."
            ),
            renderer="boolean",
        ),
    )

    error_sink: ErrorSink
    loader: ModuleLoader = field(default_factory=ImportlibModuleLoader)
    sort_default: bool = False

    def get_items(self, config: Mapping[str, Any]) -> Iterator[DataListItem]:
        names = self._member_names(config)
        if names is None:
            return iter(())

        sort_alphabetically = config.get(SORT_ALPHABETICALLY)
        if sort_alphabetically is None:
            sort_alphabetically = self.sort_default
        if to_bool(sort_alphabetically):
            names = sorted(names, key=str.casefold)

        return (DataListItem(name=split_pascal_casing(name), value=name) for name in names)

    def _member_names(self, config: Mapping[str, Any]) -> list[str] | None:
        enum_type = config.get(ENUM_TYPE)
        if (
            not isinstance(enum_type, Sequence)
            or isinstance(enum_type, str)
            or len(enum_type) < 2
        ):
            self._report(ValueError(f"'{ENUM_TYPE}' must be [module, type], got {enum_type!r}"))
            return None

        module_name, type_name = str(enum_type[0]), str(enum_type[1])

        try:
            module = self.loader.load_module(module_name)
        except Exception as exc:
            self._report(exc)
            return None

        try:
            type_handle = self.loader.resolve_type(module, type_name)
        except Exception as exc:
            self._report(exc)
            return None

        try:
            return [str(name) for name in self.loader.list_member_names(type_handle)]
        except Exception as exc:
            self._report(exc)
            return None

    def _report(self, exc: BaseException) -> None:
        logger.debug("datalist.enum.unavailable", extra={"error": str(exc)})
        self.error_sink.report(ErrorEvent(source=f"dataSource:{self.key}", error=exc))


__all__ = ["EnumDataListSource", "ImportlibModuleLoader", "LoadedEnumCatalog"]
