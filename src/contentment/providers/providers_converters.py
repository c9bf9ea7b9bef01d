"""Value converters turning stored strings into typed values."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..domain.models import ConfigurationField
from ..plugins.base import ModuleLoader
from .providers_base import DataListValueConverter
from .providers_enum import ENUM_TYPE, ImportlibModuleLoader


@dataclass(slots=True)
class EnumValueConverter(DataListValueConverter):
    """Convert the stored member name into the enum member."""

    key = "enum"
    name = "Enum"
    description = "Convert the value to a member of a Python enum."
    icon = "icon-indent"
    fields = (
        ConfigurationField(
            key=ENUM_TYPE,
            label="Enum",
            description="Select the enum the stored value belongs to.",
            renderer="cascading-dropdown-list.html",
            renderer_config={"apis": ["/api/datalist/enums?module={0}"]},
        ),
    )

    loader: ModuleLoader = field(default_factory=ImportlibModuleLoader)

    def convert(self, value: Any, config: Mapping[str, Any]) -> Any:
        enum_type = config.get(ENUM_TYPE)
        if (
            not isinstance(enum_type, Sequence)
            or isinstance(enum_type, str)
            or len(enum_type) < 2
        ):
            raise ValueError(f"'{ENUM_TYPE}' must be [module, type], got {enum_type!r}")

        module = self.loader.load_module(str(enum_type[0]))
        type_handle = self.loader.resolve_type(module, str(enum_type[1]))
        return type_handle[str(value)]


class IntegerValueConverter(DataListValueConverter):
    """Convert the stored value into an integer."""

    key = "integer"
    name = "Integer"
    description = "Convert the value to an integer."
    icon = "icon-calculator"

    def convert(self, value: Any, config: Mapping[str, Any]) -> Any:
        return int(str(value).strip())


__all__ = ["EnumValueConverter", "IntegerValueConverter"]
