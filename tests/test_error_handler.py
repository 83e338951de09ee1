"""Tests for error handler."""

from json_power_tools.config import FormatterConfig
from json_power_tools.error_handler import ErrorHandler
from json_power_tools.types import ProcessingError, ErrorType


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_handle_syntax_error(self):
        """Test handling of parse failures."""
        response = self.error_handler.handle_processing_error(
            ProcessingError("JSON parsing failed", ErrorType.SYNTAX)
        )

        assert not response.can_recover
        assert "invalid json" in response.suggested_action.lower()

    def test_handle_filesystem_error(self):
        """Test handling of filesystem errors."""
        response = self.error_handler.handle_processing_error(
            ProcessingError("Permission denied", ErrorType.FILESYSTEM, path="a.json")
        )

        assert response.can_recover
        assert "permission" in response.suggested_action.lower()

    def test_handle_recursion_error(self):
        response = self.error_handler.handle_processing_error(
            ProcessingError("too deep", ErrorType.RECURSION)
        )

        assert not response.can_recover
        assert "unwrap depth" in response.suggested_action.lower()

    def test_handle_unexpected_error(self):
        response = self.error_handler.handle_processing_error(
            ProcessingError("Unexpected error: boom", ErrorType.UNEXPECTED)
        )

        assert not response.can_recover
        assert "permission" not in response.suggested_action.lower()
        assert "internal error" in response.suggested_action.lower()

    def test_failure_result_for_text(self, caplog):
        error = ProcessingError("JSON string is empty", ErrorType.SYNTAX)

        with caplog.at_level("ERROR"):
            result = self.error_handler.failure_result(error)

        assert not result.success
        assert result.text is None
        assert result.path is None
        assert result.error is error
        assert result.error_type == ErrorType.SYNTAX
        assert "Error formatting JSON content" in caplog.text

    def test_failure_result_for_file(self, caplog):
        error = ProcessingError("JSON parsing failed", ErrorType.SYNTAX)

        with caplog.at_level("ERROR"):
            result = self.error_handler.failure_result(error, "/data/a.json")

        assert result.path == "/data/a.json"
        assert error.path == "/data/a.json"
        assert "Error processing /data/a.json" in caplog.text

    def test_failure_result_uses_error_path(self):
        error = ProcessingError("Cannot read", ErrorType.FILESYSTEM, path="/data/b.json")

        assert self.error_handler.failure_result(error).path == "/data/b.json"

    def test_validate_config_defaults(self):
        result = self.error_handler.validate_config(FormatterConfig())

        assert result.is_valid
        assert result.warnings == []

    def test_validate_config_never_raises(self):
        result = self.error_handler.validate_config(object())

        assert result.is_valid
        assert len(result.warnings) == 1
