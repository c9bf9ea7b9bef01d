"""Capability interfaces supplied by the hosting environment.

Providers never reach for global services directly: the registry builder
hands them an error sink and, for reflection-backed sources, a module
loader. The HTTP layer lists selectable enums through an enum catalog.
All are plain protocols so tests can swap in fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from ..domain.models import ErrorEvent


@runtime_checkable
class ErrorSink(Protocol):
    """Fire-and-forget receiver for caught provider failures."""

    def report(self, event: ErrorEvent) -> None:
        """Record ``event``. Must not raise and must not block."""


@runtime_checkable
class ModuleLoader(Protocol):
    """Three-operation surface used to reach types at runtime."""

    def load_module(self, identifier: str) -> Any:
        """Return the module registered under ``identifier`` or raise."""

    def resolve_type(self, module: Any, qualified_name: str) -> Any:
        """Return the type named ``qualified_name`` inside ``module`` or raise."""

    def list_member_names(self, type_handle: Any) -> Sequence[str]:
        """Return the enumeration member names in declaration order or raise."""


@runtime_checkable
class EnumCatalog(Protocol):
    """Lists the enums a module exposes for selection."""

    def list_enum_types(self, identifier: str) -> Sequence[str]:
        """Return qualified enum names declared in ``identifier``.

        Raises :class:`LookupError` when the module is not available.
        """
