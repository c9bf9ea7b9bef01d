from pathlib import Path

import pytest

from src.contentment.config import AppConfig


def test_defaults() -> None:
    config = AppConfig()

    assert config.editors_path_root == "/App_Plugins/Contentment/editors/"
    assert config.enum_sort_default is False
    assert config.code_editor_assets_path == Path("./umbraco/lib/ace-builds/src-min-noconflict")


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONTENTMENT_EDITORS_PATH_ROOT", "/static/editors")
    monkeypatch.setenv("CONTENTMENT_ENUM_SORT_DEFAULT", "true")

    config = AppConfig.build_default()

    assert config.enum_sort_default is True
    assert config.resolve_view("dropdown-list.html") == "/static/editors/dropdown-list.html"


def test_resolve_view_keeps_absolute_paths() -> None:
    config = AppConfig()

    assert config.resolve_view("/custom/view.html") == "/custom/view.html"
    assert config.resolve_view("") == ""
