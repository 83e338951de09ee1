"""Strict JSON parser used for whole documents and embedded strings."""

import json
import logging
import math
from typing import Any, Optional, Tuple
from .types import ProcessingError, ErrorType
from .utils.validation import ValidationUtils


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {literal}")
    return value


class JSONParser:
    """
    JSON parser that accepts strict JSON only.

    The standard library decoder also accepts ``NaN``, ``Infinity`` and
    ``-Infinity``; those are rejected here so that a document parses if and
    only if it is valid JSON. Numbers outside float range, such as ``1e400``,
    are rejected as well.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._decoder = json.JSONDecoder(
            parse_float=_parse_finite_float,
            parse_constant=_reject_constant
        )

    def parse(self, json_string: str) -> Any:
        """
        Parse a complete JSON document.

        Surrounding whitespace is ignored.

        Args:
            json_string: JSON text to parse

        Returns:
            Parsed JSON value (any JSON type, including primitives)

        Raises:
            ProcessingError: If the text is empty or not valid JSON
        """
        if not isinstance(json_string, str):
            raise ProcessingError(f"Expected text, got {type(json_string).__name__}",
                                  ErrorType.SYNTAX)

        text = json_string.strip()
        if not text:
            raise ProcessingError("JSON string is empty", ErrorType.SYNTAX)

        try:
            return self._decoder.decode(text)
        except json.JSONDecodeError as e:
            raise ProcessingError(
                f"JSON parsing failed: {ValidationUtils.describe_decode_error(e)}",
                ErrorType.SYNTAX
            )
        except ValueError as e:
            raise ProcessingError(f"JSON parsing failed: {e}", ErrorType.SYNTAX)
        except RecursionError:
            raise ProcessingError("JSON parsing failed: document is nested too deeply",
                                  ErrorType.RECURSION)

    def try_parse(self, json_string: str) -> Tuple[bool, Any]:
        """
        Parse without raising.

        Returns:
            Tuple of (parsed_ok, value); value is None when parsing failed
        """
        try:
            return True, self._decoder.decode(json_string)
        except (ValueError, RecursionError):
            return False, None
