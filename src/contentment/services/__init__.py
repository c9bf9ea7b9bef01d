"""Configuration resolution services."""

from .error_sink import LoggingErrorSink
from .merge import merge_defaults
from .normalizer import normalize_selection
from .registry import ProviderRegistry, get_registry, initialize
from .resolver import ConfigurationResolver, resolve

__all__ = [
    "ConfigurationResolver",
    "LoggingErrorSink",
    "ProviderRegistry",
    "get_registry",
    "initialize",
    "merge_defaults",
    "normalize_selection",
    "resolve",
]
