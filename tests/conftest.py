from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from src.contentment.config import AppConfig
from src.contentment.providers.providers_factory import default_providers
from src.contentment.services.registry import ProviderRegistry, initialize, reset_registry
from src.contentment.services.resolver import ConfigurationResolver
from tests.mocks.providers import FakeModuleLoader, RecordingErrorSink, color_loader

os.environ.setdefault("CONTENTMENT_LOG_LEVEL", "WARNING")


@pytest.fixture
def error_sink() -> RecordingErrorSink:
    return RecordingErrorSink()


@pytest.fixture
def loader() -> FakeModuleLoader:
    return color_loader()


@pytest.fixture
def registry(error_sink: RecordingErrorSink, loader: FakeModuleLoader) -> Iterator[ProviderRegistry]:
    registry = initialize(default_providers(error_sink=error_sink, loader=loader))
    yield registry
    reset_registry()


@pytest.fixture
def resolver(registry: ProviderRegistry, error_sink: RecordingErrorSink) -> ConfigurationResolver:
    return ConfigurationResolver(registry=registry, error_sink=error_sink)


@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    return AppConfig(code_editor_assets_path=tmp_path / "ace")
