"""Contentment data list configuration engine.

Editors compose list-like inputs from pluggable providers: a data source
supplying the options, a list editor rendering them and an optional value
converter. This package resolves their persisted configuration into the
flat runtime configuration consumed by the front-end.
"""

from .services.registry import ProviderRegistry, get_registry, initialize
from .services.resolver import ConfigurationResolver, resolve

__all__ = [
    "ConfigurationResolver",
    "ProviderRegistry",
    "get_registry",
    "initialize",
    "resolve",
]
