"""Routes for the content blocks and code editor configuration."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from ..editors.code_editor import CodeEditorConfigurationEditor, convert_code_editor_value
from ..services.content_blocks import ContentBlocksEditor
from .schemas import (
    CodeEditorConfigurationResponse,
    CodeEditorValueRequest,
    ConvertResponse,
    ValueEditorResponse,
)

router = APIRouter(prefix="/api", tags=["editors"])


def get_content_blocks_editor(request: Request) -> ContentBlocksEditor:
    try:
        return request.app.state.content_blocks_editor  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - wiring error
        raise RuntimeError("ContentBlocksEditor is not configured") from exc


def get_code_editor(request: Request) -> CodeEditorConfigurationEditor:
    try:
        return request.app.state.code_editor  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - wiring error
        raise RuntimeError("CodeEditorConfigurationEditor is not configured") from exc


@router.post("/content-blocks/editor", response_model=ValueEditorResponse)
def read_content_blocks_editor(
    configuration: dict[str, Any] = Body(...),
    editor: ContentBlocksEditor = Depends(get_content_blocks_editor),
) -> ValueEditorResponse:
    settings = editor.value_editor(configuration)
    return ValueEditorResponse(
        view=settings.view, hideLabel=settings.hide_label, config=dict(settings.config)
    )


@router.get("/code-editor/configuration", response_model=CodeEditorConfigurationResponse)
def read_code_editor_configuration(
    editor: CodeEditorConfigurationEditor = Depends(get_code_editor),
) -> CodeEditorConfigurationResponse:
    return CodeEditorConfigurationResponse(
        fields=[item.as_dict() for item in editor.fields],
        defaultConfiguration=editor.default_configuration,
    )


@router.post("/code-editor/convert", response_model=ConvertResponse)
def convert_code_editor(payload: CodeEditorValueRequest) -> ConvertResponse:
    return ConvertResponse(value=convert_code_editor_value(payload.value))


__all__ = ["router"]
