"""Data list API: provider catalogue, configuration fields and resolution."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Request

from ..domain.models import ProviderFamily
from ..plugins.base import EnumCatalog
from ..services.configuration_editor import DataListConfigurationEditor
from ..services.registry import ProviderRegistry
from ..services.resolver import ConfigurationResolver
from .errors import not_found_error
from .schemas import (
    ConfigurationFieldsResponse,
    ConvertRequest,
    ConvertResponse,
    DataListItemModel,
    ProviderDescriptorModel,
)

router = APIRouter(prefix="/api/datalist", tags=["datalist"])


def _state(request: Request, name: str) -> Any:
    try:
        return getattr(request.app.state, name)
    except AttributeError as exc:
        raise RuntimeError(f"{name} is not configured") from exc


def get_registry(request: Request) -> ProviderRegistry:
    return _state(request, "registry")


def get_resolver(request: Request) -> ConfigurationResolver:
    return _state(request, "resolver")


def get_configuration_editor(request: Request) -> DataListConfigurationEditor:
    return _state(request, "configuration_editor")


def get_enum_catalog(request: Request) -> EnumCatalog:
    return _state(request, "enum_catalog")


@router.get("/providers/{family}", response_model=list[ProviderDescriptorModel])
def list_providers(
    family: ProviderFamily,
    registry: ProviderRegistry = Depends(get_registry),
) -> list[ProviderDescriptorModel]:
    return [
        ProviderDescriptorModel(**descriptor.as_dict(), view=descriptor.view)
        for descriptor in registry.list(family)
    ]


@router.get("/configuration", response_model=ConfigurationFieldsResponse)
def read_configuration_fields(
    editor: DataListConfigurationEditor = Depends(get_configuration_editor),
) -> ConfigurationFieldsResponse:
    return ConfigurationFieldsResponse(fields=[item.as_dict() for item in editor.fields()])


@router.post("/resolve")
def resolve_configuration(
    configuration: dict[str, Any] = Body(...),
    resolver: ConfigurationResolver = Depends(get_resolver),
) -> dict[str, Any]:
    return resolver.resolve(configuration)


@router.post("/convert", response_model=ConvertResponse)
def convert_value(
    payload: ConvertRequest,
    resolver: ConfigurationResolver = Depends(get_resolver),
) -> ConvertResponse:
    return ConvertResponse(value=resolver.convert(payload.configuration, payload.value))


@router.get("/enums", response_model=list[DataListItemModel])
def list_enums(
    module: str = Query(..., min_length=1),
    catalog: EnumCatalog = Depends(get_enum_catalog),
) -> list[DataListItemModel]:
    try:
        names = catalog.list_enum_types(module)
    except LookupError as exc:
        raise not_found_error(f"module '{module}' is not loaded") from exc
    return [DataListItemModel(name=name.rsplit(".", 1)[-1], value=name) for name in names]


__all__ = ["router"]
