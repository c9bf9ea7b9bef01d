"""Smoke-check imports for the engine's modules.

Guards against refactors that would break the wiring between the registry,
the providers and the HTTP surface.
"""

from __future__ import annotations

from importlib import import_module
from types import ModuleType

import pytest

from src.contentment.services.registry import reset_registry

MODULES_AND_SYMBOLS = [
    ("src.contentment", "resolve"),
    ("src.contentment.config", "AppConfig"),
    ("src.contentment.logging", "configure_logging"),
    ("src.contentment.exceptions", "ConfigurationError"),
    ("src.contentment.domain", "DataListItem"),
    ("src.contentment.plugins", "ModuleLoader"),
    ("src.contentment.providers", "EnumDataListSource"),
    ("src.contentment.providers.providers_factory", "default_providers"),
    ("src.contentment.services", "ConfigurationResolver"),
    ("src.contentment.services.configuration_editor", "DataListConfigurationEditor"),
    ("src.contentment.services.content_blocks", "ContentBlocksEditor"),
    ("src.contentment.editors.code_editor", "CodeEditorConfigurationEditor"),
    ("src.contentment.api", "datalist_router"),
    ("src.contentment.dependencies", "include_routers"),
    ("src.contentment.main", "create_app"),
]


@pytest.mark.parametrize(("module_name", "symbol"), MODULES_AND_SYMBOLS)
def test_importable_symbols(module_name: str, symbol: str) -> None:
    """Import modules and verify that public symbols are exposed."""

    module: ModuleType = import_module(module_name)
    assert hasattr(module, symbol), f"{module_name} missing {symbol}"
    reset_registry()
