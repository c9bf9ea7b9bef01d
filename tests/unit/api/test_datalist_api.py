from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.contentment.config import AppConfig
from src.contentment.main import create_app
from src.contentment.providers.providers_enum import ImportlibModuleLoader, LoadedEnumCatalog
from src.contentment.services.registry import reset_registry
from tests.mocks import enums as enum_fixtures
from tests.mocks.providers import RecordingErrorSink, color_loader


@pytest.fixture
def sink() -> RecordingErrorSink:
    return RecordingErrorSink()


@pytest.fixture
def client(tmp_path: Path, sink: RecordingErrorSink) -> Iterator[TestClient]:
    config = AppConfig(code_editor_assets_path=tmp_path / "ace", log_level="WARNING")
    app = create_app(config, error_sink=sink, loader=ImportlibModuleLoader())
    yield TestClient(app)
    reset_registry()


def test_list_providers_in_registration_order(client: TestClient) -> None:
    response = client.get("/api/datalist/providers/listEditor")

    assert response.status_code == 200
    data = response.json()
    assert [item["key"] for item in data] == ["dropdown", "checkboxList", "radioButtonList"]
    assert data[0]["defaultConfig"] == {"allowEmpty": True}
    assert data[0]["fields"][0]["key"] == "allowEmpty"


def test_unknown_family_is_rejected(client: TestClient) -> None:
    response = client.get("/api/datalist/providers/widgets")

    assert response.status_code == 422


def test_configuration_fields(client: TestClient) -> None:
    response = client.get("/api/datalist/configuration")

    assert response.status_code == 200
    fields = response.json()["fields"]
    assert [item["key"] for item in fields] == ["dataSource", "listEditor", "valueConverter"]
    assert fields[2]["rendererConfig"]["maxItems"] == 1


def test_resolve_enum_with_dropdown(client: TestClient, sink: RecordingErrorSink) -> None:
    payload = {
        "dataSource": [
            {
                "key": "enum",
                "value": {
                    "enumType": ["tests.mocks.enums", "tests.mocks.enums.Color"],
                    "sortAlphabetically": True,
                },
            }
        ],
        "listEditor": [{"type": "dropdown", "value": {"allowEmpty": False}}],
    }

    response = client.post("/api/datalist/resolve", json=payload)

    assert response.status_code == 200
    assert response.json() == {
        "items": [
            {"name": "Dark Blue", "value": "DarkBlue"},
            {"name": "Green", "value": "Green"},
            {"name": "Red", "value": "Red"},
        ],
        "allowEmpty": False,
    }
    assert sink.events == []


def test_resolve_with_broken_enum_still_returns_editor_config(
    client: TestClient, sink: RecordingErrorSink
) -> None:
    payload = {
        "dataSource": [{"key": "enum", "value": {"enumType": ["tests.mocks.gone", "X"]}}],
        "listEditor": [{"key": "radioButtonList"}],
    }

    response = client.post("/api/datalist/resolve", json=payload)

    assert response.status_code == 200
    assert response.json() == {"items": [], "orientation": "vertical", "showDescriptions": True}
    assert len(sink.events) == 1


def test_resolve_corrupt_configuration_returns_422(client: TestClient) -> None:
    response = client.post("/api/datalist/resolve", json={"listEditor": {"key": "dropdown"}})

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "invalid_configuration"
    assert error["details"] == {"path": "listEditor"}


def test_convert_value(client: TestClient) -> None:
    response = client.post(
        "/api/datalist/convert",
        json={"configuration": {"valueConverter": [{"key": "integer"}]}, "value": "41"},
    )

    assert response.status_code == 200
    assert response.json() == {"value": 41}


def test_list_enums(client: TestClient) -> None:
    response = client.get("/api/datalist/enums", params={"module": enum_fixtures.__name__})

    assert response.status_code == 200
    assert response.json() == [
        {"name": "Color", "value": "tests.mocks.enums.Color", "description": None, "icon": None},
        {"name": "Sample", "value": "tests.mocks.enums.Sample", "description": None, "icon": None},
    ]


def test_list_enums_for_missing_module(client: TestClient) -> None:
    response = client.get("/api/datalist/enums", params={"module": "tests.mocks.gone"})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "not_found"


@pytest.mark.parametrize("module", ["..", ".enums", "tests..mocks"])
def test_list_enums_rejects_unloadable_names(client: TestClient, module: str) -> None:
    response = client.get("/api/datalist/enums", params={"module": module})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "not_found"


def test_list_enums_never_imports_modules(tmp_path: Path) -> None:
    config = AppConfig(code_editor_assets_path=tmp_path / "ace", log_level="WARNING")
    app = create_app(config, enum_catalog=LoadedEnumCatalog(modules={}))
    client = TestClient(app)

    response = client.get("/api/datalist/enums", params={"module": enum_fixtures.__name__})

    assert response.status_code == 404
    reset_registry()


def test_list_enums_works_with_any_module_loader(tmp_path: Path, sink: RecordingErrorSink) -> None:
    config = AppConfig(code_editor_assets_path=tmp_path / "ace", log_level="WARNING")
    app = create_app(config, error_sink=sink, loader=color_loader())
    client = TestClient(app)

    response = client.get("/api/datalist/enums", params={"module": enum_fixtures.__name__})
    resolved = client.post(
        "/api/datalist/resolve",
        json={"dataSource": [{"key": "enum", "value": {"enumType": ["MyAssembly", "MyAssembly.Color"]}}]},
    )

    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Color", "Sample"]
    assert [item["value"] for item in resolved.json()["items"]] == ["Red", "DarkBlue", "green", "Amber"]
    reset_registry()
