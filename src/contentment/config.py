"""Application configuration for the Contentment data list engine.

Defaults mirror a stock Umbraco install: editor views are served from
``/App_Plugins/Contentment/editors/`` and the Ace editor assets live under
``umbraco/lib/ace-builds/src-min-noconflict``. Values are overridden through
``CONTENTMENT_*`` environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_code_editor_assets_path() -> Path:
    return Path("./umbraco/lib/ace-builds/src-min-noconflict")


class AppConfig(BaseSettings):
    """Pydantic settings container for the engine and its HTTP surface."""

    model_config = SettingsConfigDict(env_prefix="CONTENTMENT_")

    title: str = Field(
        default="Contentment",
        min_length=1,
        description="Title reported by the FastAPI application.",
    )
    editors_path_root: str = Field(
        default="/App_Plugins/Contentment/editors/",
        description="URL prefix under which editor views are served.",
    )
    code_editor_assets_path: Path = Field(
        default_factory=_default_code_editor_assets_path,
        description="Directory scanned for Ace editor mode-*.js and theme-*.js files.",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to logging.basicConfig.",
    )
    enum_sort_default: bool = Field(
        default=False,
        description="Sort enum members alphabetically when sortAlphabetically is not set.",
    )

    @classmethod
    def build_default(cls) -> "AppConfig":
        """Construct configuration with environment-aware defaults."""

        return cls()

    def resolve_view(self, name: str) -> str:
        """Return the public URL for an editor view file."""

        if not name or name.startswith(("/", "~")):
            return name
        return f"{self.editors_path_root.rstrip('/')}/{name}"


__all__ = ["AppConfig"]
