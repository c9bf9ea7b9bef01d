"""Value editor settings for the content blocks property editor."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..config import AppConfig
from ..domain.models import ProviderFamily, ValueEditorSettings
from ..exceptions import ensure_mapping
from ..providers.providers_base import ContentBlocksDisplayMode
from ..utils.text import to_bool
from .merge import merge_defaults
from .registry import ProviderRegistry
from .resolver import first_selection

logger = logging.getLogger(__name__)

DEFAULT_VIEW = "_empty.html"
HIDE_LABEL = "hideLabel"


@dataclass(slots=True)
class ContentBlocksEditor:
    """Pick the view and configuration used to render content blocks."""

    registry: ProviderRegistry
    config: AppConfig

    def value_editor(self, raw: Mapping[str, Any] | None) -> ValueEditorSettings:
        if raw is None:
            return ValueEditorSettings(view=self.config.resolve_view(DEFAULT_VIEW))

        configuration = ensure_mapping(raw, path="$")
        hide_label = to_bool(configuration.get(HIDE_LABEL, False))

        selection = first_selection(configuration, ProviderFamily.DISPLAY_MODE.value)
        display_mode = (
            self.registry.get(ProviderFamily.DISPLAY_MODE, selection.key) if selection else None
        )
        if not isinstance(display_mode, ContentBlocksDisplayMode) or not display_mode.view:
            if selection is not None:
                logger.info("content_blocks.display_mode_missing", extra={"key": selection.key})
            return ValueEditorSettings(
                view=self.config.resolve_view(DEFAULT_VIEW), hide_label=hide_label
            )

        return ValueEditorSettings(
            view=self.config.resolve_view(display_mode.view),
            hide_label=hide_label,
            config=merge_defaults(selection.value, display_mode.default_config),
        )


__all__ = ["ContentBlocksEditor"]
