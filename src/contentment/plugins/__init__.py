"""Interfaces for the collaborators providers are built with."""

from .base import EnumCatalog, ErrorSink, ModuleLoader

__all__ = ["EnumCatalog", "ErrorSink", "ModuleLoader"]
