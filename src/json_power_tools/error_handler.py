"""Error handling implementation for JSON Power Tools."""

import logging
from typing import Any, Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ErrorResponse,
    FormatResult,
    ProcessingError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for formatting operations.

    Turns internal errors into failed results and user-facing suggestions so
    that no public operation has to raise.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """
        Describe how a caller can react to a processing error.

        Args:
            error: ProcessingError to handle

        Returns:
            ErrorResponse with a suggested action
        """
        if error.error_type == ErrorType.SYNTAX:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Invalid JSON content. Fix the syntax error and try again."
            )
        elif error.error_type == ErrorType.FILESYSTEM:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Check that the file exists and that you have "
                                 "permission to read and write it."
            )
        elif error.error_type == ErrorType.RECURSION:
            return ErrorResponse(
                can_recover=False,
                suggested_action="The document is nested too deeply to process. "
                                 "Consider setting a maximum unwrap depth."
            )
        elif error.error_type == ErrorType.UNEXPECTED:
            return ErrorResponse(
                can_recover=False,
                suggested_action="An internal error occurred. Please check logs and report the problem."
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry."
            )

    def failure_result(self, error: ProcessingError,
                       path: Optional[str] = None) -> FormatResult:
        """
        Log an error and wrap it in a failed result.

        Args:
            error: Error raised while processing
            path: File being processed, if any

        Returns:
            Failed FormatResult carrying the error
        """
        target = path or error.path
        if target:
            self.logger.error(f"Error processing {target}: {error}")
        else:
            self.logger.error(f"Error formatting JSON content: {error}")

        if error.path is None and target is not None:
            error.path = str(target)

        return FormatResult(success=False, text=None,
                            path=str(target) if target else None, error=error)

    def validate_config(self, config: Any) -> ValidationResult:
        """
        Check a configuration for degenerate values.

        Args:
            config: FormatterConfig to inspect

        Returns:
            ValidationResult with warnings
        """
        try:
            return ValidationUtils.validate_config(config)
        except (AttributeError, TypeError) as e:
            self.logger.error(f"Unexpected error during configuration validation: {e}")
            return ValidationResult(is_valid=True, errors=[],
                                    warnings=[f"Configuration could not be inspected: {e}"])
