"""
JSON Power Tools - recursive JSON normalization.

Rewrites JSON documents in canonical pretty-printed form, expanding string
values that themselves hold serialized JSON objects or arrays.
"""

from .json_formatter import JSONFormatter
from .normalizer import JSONNormalizer
from .traversal import FileDiscovery
from .unwrapper import StringUnwrapper
from .config import (
    FormatterConfig,
    Indentation,
    get_config,
    set_config,
    reset_config,
    load_settings
)
from .types import BulkFormatResult, FormatResult, IndentationKind, ErrorType

__version__ = "1.0.0"
__all__ = [
    "JSONFormatter",
    "JSONNormalizer",
    "FileDiscovery",
    "StringUnwrapper",
    "FormatterConfig",
    "Indentation",
    "get_config",
    "set_config",
    "reset_config",
    "load_settings",
    "BulkFormatResult",
    "FormatResult",
    "IndentationKind",
    "ErrorType",
]
