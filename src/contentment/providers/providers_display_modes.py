"""Display modes for the content blocks editor."""

from __future__ import annotations

from types import MappingProxyType

from ..domain.models import ConfigurationField, OverlaySize
from .providers_base import ContentBlocksDisplayMode


class BlocksDisplayMode(ContentBlocksDisplayMode):
    """Blocks are stacked as a list of panels."""

    key = "blocks"
    name = "Blocks"
    description = "Blocks will be displayed in a list similar to the Block List editor."
    icon = "icon-thumbnail-list"
    view = "content-blocks.html"
    default_config = MappingProxyType({"allowCopy": True, "allowCreateContentTemplate": False})
    overlay_size = OverlaySize.SMALL


class CardsDisplayMode(ContentBlocksDisplayMode):
    """Blocks are displayed as cards."""

    key = "cards"
    name = "Cards"
    description = "Blocks will be displayed as cards."
    icon = "icon-playing-cards"
    view = "content-cards.html"
    default_config = MappingProxyType({"sortableAxis": False, "enablePreview": False})
    fields = (
        ConfigurationField(
            key="notes",
            label="",
            renderer="notes",
            renderer_config={
                "notes": (
                    '<div class="alert alert-form">'
                    "<p><strong>A note about block type previews.</strong></p>"
                    "<p>The preview feature for block types is unsupported in Cards "
                    "display mode and will be disabled.</p></div>"
                ),
                "hideLabel": True,
            },
        ),
    )
    overlay_size = OverlaySize.SMALL


__all__ = ["BlocksDisplayMode", "CardsDisplayMode"]
