"""Validation utilities for configuration values and decoder errors."""

import json
from typing import Any, List
from ..types import ValidationResult, ValidationError


class ValidationUtils:
    """Utility class for validating configuration and describing errors."""

    @staticmethod
    def validate_config(config: Any) -> ValidationResult:
        """
        Inspect a formatter configuration for degenerate values.

        Degenerate values are accepted and produce defined behavior, so this
        only ever reports warnings.

        Args:
            config: FormatterConfig to inspect

        Returns:
            ValidationResult with warnings (never errors)
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        if config.max_depth <= 0:
            warnings.append(f"Maximum depth is {config.max_depth}; "
                            "traversal will not list any directory.")

        indentation = config.indentation
        if indentation.kind.value == "spaces" and indentation.size <= 0:
            warnings.append(f"Indentation size is {indentation.size}; "
                            "output will be written on a single line.")
        elif indentation.kind.value == "spaces" and indentation.size > 10:
            warnings.append(f"Indentation size {indentation.size} exceeds 10 "
                            "and will be clamped to 10.")

        if not config.allowed_extensions:
            warnings.append("No allowed extensions configured; traversal will find nothing.")
        else:
            for extension in config.allowed_extensions:
                if not extension.startswith("."):
                    warnings.append(f"Extension '{extension}' has no leading dot "
                                    "and will never match a file.")

        if config.max_unwrap_depth is not None and config.max_unwrap_depth < 0:
            warnings.append(f"Maximum unwrap depth is {config.max_unwrap_depth}; "
                            "embedded JSON strings will not be unwrapped.")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def describe_decode_error(error: json.JSONDecodeError) -> str:
        """Render a decoder error with its position."""
        return f"{error.msg} at line {error.lineno}, column {error.colno}"
