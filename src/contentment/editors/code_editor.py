"""Configuration for the Ace-based code editor.

Umbraco ships a streamlined set of Ace modes and themes. Additional
``mode-*.js``/``theme-*.js`` files copied into the assets folder show up as
dropdown options the next time the configuration is requested.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..domain.models import ConfigurationField, DataListItem
from ..providers.providers_editors import ALLOW_EMPTY
from ..services.merge import merge_defaults
from ..utils.text import to_first_upper

FONT_SIZE = "fontSize"
MODE = "mode"
THEME = "theme"
USE_WRAP_MODE = "useWrapMode"

DEFAULT_MODE = "razor"
DEFAULT_THEME = "chrome"
DEFAULT_FONT_SIZE = "14px"

DROPDOWN_VIEW = "dropdown-list.html"


def scan_assets(path: Path) -> tuple[list[DataListItem], list[DataListItem]]:
    """Return ``(modes, themes)`` discovered in the Ace assets folder."""

    modes: list[DataListItem] = []
    themes: list[DataListItem] = []
    if not path.is_dir():
        return modes, themes

    for file in sorted(path.glob("*.js")):
        stem = file.stem
        if stem.startswith("mode-"):
            mode = stem.removeprefix("mode-").lower()
            modes.append(DataListItem(name=to_first_upper(mode), value=mode))
        elif stem.startswith("theme-"):
            theme = stem.removeprefix("theme-").lower()
            themes.append(DataListItem(name=to_first_upper(theme), value=theme))
    return modes, themes


@dataclass(slots=True)
class CodeEditorConfigurationEditor:
    """Fields and defaults offered when configuring a code editor property."""

    assets_path: Path
    fields: list[ConfigurationField] = field(init=False, default_factory=list)
    default_configuration: dict[str, Any] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        modes, themes = scan_assets(self.assets_path)
        discovered: dict[str, Any] = {}

        self.fields.append(
            ConfigurationField(
                key="notes",
                label="",
                renderer="notes",
                renderer_config={
                    "notes": (
                        "<p>This editor uses the Ace editor distributed with Umbraco. "
                        "Copy <code>mode-*</code> or <code>theme-*</code> files into "
                        f"<code>{self.assets_path}</code> to offer more options.</p>"
                    ),
                },
            )
        )

        if modes:
            discovered[MODE] = DEFAULT_MODE
            self.fields.append(
                ConfigurationField(
                    key=MODE,
                    label="Programming language mode",
                    description=(
                        "Select the programming language mode. "
                        "By default, 'Razor' mode will be used."
                    ),
                    renderer=DROPDOWN_VIEW,
                    renderer_config={
                        ALLOW_EMPTY: False,
                        "items": [item.as_dict() for item in modes],
                    },
                )
            )

        if themes:
            discovered[THEME] = DEFAULT_THEME
            self.fields.append(
                ConfigurationField(
                    key=THEME,
                    label="Theme",
                    description=(
                        "Set the theme for the code editor. "
                        "By default, 'Chrome' theme will be used."
                    ),
                    renderer=DROPDOWN_VIEW,
                    renderer_config={
                        ALLOW_EMPTY: False,
                        "items": [item.as_dict() for item in themes],
                    },
                )
            )

        self.fields.append(
            ConfigurationField(
                key=FONT_SIZE,
                label="Font size",
                description=(
                    "Set the font size. The value must be a valid CSS font-size. "
                    "The default value is '14px'."
                ),
                renderer="textstring",
            )
        )
        self.fields.append(
            ConfigurationField(
                key=USE_WRAP_MODE,
                label="Word wrapping",
                description="Select to enable word wrapping.",
                renderer="boolean",
            )
        )

        self.default_configuration = merge_defaults(discovered, {FONT_SIZE: DEFAULT_FONT_SIZE})


def convert_code_editor_value(value: Any) -> str | None:
    """Code editor values are consumed as plain strings."""

    return None if value is None else str(value)


__all__ = [
    "CodeEditorConfigurationEditor",
    "convert_code_editor_value",
    "scan_assets",
]
