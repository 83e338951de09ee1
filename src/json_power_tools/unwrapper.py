"""Recursive replacement of JSON-encoded strings with their structures."""

import logging
from typing import Any, Optional
from .parser import JSONParser


class StringUnwrapper:
    """
    Replace object members holding serialized JSON with the parsed value.

    A member is a candidate when it is a string starting with ``{`` or
    ``[``. It is replaced only when it parses to an object or array, and the
    replacement is itself unwrapped, so strings nested inside strings expand
    at every level. Anything else is returned untouched: numbers, booleans
    and nulls are never stringified, and strings such as ``"123"``,
    ``"true"`` or ``"{not json}"`` stay strings.

    Only object members are candidates. Strings sitting directly in an array
    are left as they are, although arrays are walked so that objects inside
    them are processed.
    """

    def __init__(self, parser: Optional[JSONParser] = None,
                 max_depth: Optional[int] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the unwrapper.

        Args:
            parser: Parser used for embedded strings
            max_depth: Optional cap on nested string unwraps along one path;
                None means unbounded
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(self.logger)
        self.max_depth = max_depth

    def unwrap(self, value: Any) -> Any:
        """
        Return a copy of value with embedded JSON strings expanded.

        Args:
            value: Parsed JSON value

        Returns:
            Transformed value; primitives are returned unchanged
        """
        return self._unwrap(value, 0)

    @staticmethod
    def looks_like_json(value: str) -> bool:
        return value.startswith(("{", "["))

    def _unwrap(self, value: Any, depth: int) -> Any:
        if isinstance(value, list):
            return [self._unwrap(item, depth) for item in value]
        if isinstance(value, dict):
            return {key: self._unwrap_member(member, depth) for key, member in value.items()}
        return value

    def _unwrap_member(self, value: Any, depth: int) -> Any:
        if isinstance(value, str):
            return self._unwrap_string(value, depth)
        if isinstance(value, (dict, list)):
            return self._unwrap(value, depth)
        return value

    def _unwrap_string(self, value: str, depth: int) -> Any:
        if not self.looks_like_json(value):
            return value

        if self.max_depth is not None and depth >= self.max_depth:
            self.logger.debug(f"Unwrap depth limit ({self.max_depth}) reached; keeping string")
            return value

        parsed_ok, parsed = self.parser.try_parse(value)
        if not parsed_ok or not isinstance(parsed, (dict, list)):
            return value

        return self._unwrap(parsed, depth + 1)
