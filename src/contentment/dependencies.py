"""Dependency wiring helpers."""

from fastapi import FastAPI

from .api.datalist_api import router as datalist_router
from .api.editors_api import router as editors_router
from .api.errors import ApiError, api_error_handler, configuration_error_handler
from .config import AppConfig
from .editors.code_editor import CodeEditorConfigurationEditor
from .exceptions import ConfigurationError
from .plugins.base import EnumCatalog, ErrorSink
from .services.configuration_editor import DataListConfigurationEditor
from .services.content_blocks import ContentBlocksEditor
from .services.registry import ProviderRegistry
from .services.resolver import ConfigurationResolver


def include_routers(
    app: FastAPI,
    config: AppConfig,
    *,
    registry: ProviderRegistry,
    error_sink: ErrorSink,
    enum_catalog: EnumCatalog,
) -> None:
    """Mount module routers and attach services."""
    app.state.config = config
    app.state.registry = registry
    app.state.error_sink = error_sink
    app.state.enum_catalog = enum_catalog
    app.state.resolver = ConfigurationResolver(registry=registry, error_sink=error_sink)
    app.state.configuration_editor = DataListConfigurationEditor(registry=registry, config=config)
    app.state.content_blocks_editor = ContentBlocksEditor(registry=registry, config=config)
    app.state.code_editor = CodeEditorConfigurationEditor(config.code_editor_assets_path)

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)

    app.include_router(datalist_router)
    app.include_router(editors_router)
