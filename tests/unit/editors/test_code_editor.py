from pathlib import Path

from src.contentment.editors.code_editor import (
    CodeEditorConfigurationEditor,
    convert_code_editor_value,
    scan_assets,
)


def _write_assets(root: Path, *names: str) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for name in names:
        (root / name).write_text("// ace", encoding="utf-8")
    return root


def test_scan_assets_splits_modes_and_themes(tmp_path: Path) -> None:
    root = _write_assets(tmp_path / "ace", "mode-razor.js", "mode-CSharp.js", "theme-chrome.js", "ace.js", "readme.txt")

    modes, themes = scan_assets(root)

    assert [item.value for item in modes] == ["csharp", "razor"]
    assert [item.name for item in modes] == ["Csharp", "Razor"]
    assert [item.value for item in themes] == ["chrome"]


def test_missing_assets_folder_only_offers_basic_fields(tmp_path: Path) -> None:
    editor = CodeEditorConfigurationEditor(tmp_path / "missing")

    assert [item.key for item in editor.fields] == ["notes", "fontSize", "useWrapMode"]
    assert editor.default_configuration == {"fontSize": "14px"}


def test_discovered_assets_add_dropdowns_and_defaults(tmp_path: Path) -> None:
    root = _write_assets(tmp_path / "ace", "mode-razor.js", "theme-chrome.js", "theme-monokai.js")

    editor = CodeEditorConfigurationEditor(root)

    assert [item.key for item in editor.fields] == ["notes", "mode", "theme", "fontSize", "useWrapMode"]
    assert editor.default_configuration == {"mode": "razor", "theme": "chrome", "fontSize": "14px"}
    theme_field = editor.fields[2]
    assert theme_field.renderer_config["allowEmpty"] is False
    assert theme_field.renderer_config["items"] == [
        {"name": "Chrome", "value": "chrome"},
        {"name": "Monokai", "value": "monokai"},
    ]


def test_code_editor_values_are_strings() -> None:
    assert convert_code_editor_value(12) == "12"
    assert convert_code_editor_value(None) is None
