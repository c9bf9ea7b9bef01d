"""Pydantic schemas for the data list API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ConfigurationFieldModel(BaseModel):
    key: str
    label: str
    description: str = ""
    renderer: str = ""
    rendererConfig: dict[str, Any] = Field(default_factory=dict)


class ProviderDescriptorModel(BaseModel):
    key: str
    name: str
    description: str
    icon: str
    fields: list[ConfigurationFieldModel] = Field(default_factory=list)
    defaultConfig: dict[str, Any] = Field(default_factory=dict)
    overlaySize: str
    view: str | None = None


class ConfigurationFieldsResponse(BaseModel):
    fields: list[ConfigurationFieldModel]


class CodeEditorConfigurationResponse(BaseModel):
    fields: list[ConfigurationFieldModel]
    defaultConfiguration: dict[str, Any] = Field(default_factory=dict)


class ConvertRequest(BaseModel):
    configuration: dict[str, Any] = Field(default_factory=dict)
    value: Any = None


class CodeEditorValueRequest(BaseModel):
    value: Any = None


class ConvertResponse(BaseModel):
    value: Any = None


class DataListItemModel(BaseModel):
    name: str
    value: str
    description: str | None = None
    icon: str | None = None


class ValueEditorResponse(BaseModel):
    view: str
    hideLabel: bool = False
    config: dict[str, Any] = Field(default_factory=dict)
