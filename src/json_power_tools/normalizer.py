"""Normalization engine: parse, unwrap embedded JSON, re-serialize."""

import json
import logging
from typing import Any, Optional
from .types import NormalizerInterface, FormatResult, ProcessingError, ErrorType
from .config import FormatterConfig
from .parser import JSONParser
from .unwrapper import StringUnwrapper
from .error_handler import ErrorHandler
from .io.file_reader import FileReader
from .io.file_writer import FileWriter


class JSONNormalizer(NormalizerInterface):
    """
    Rewrites JSON documents in canonical pretty-printed form.

    Each document is processed independently; the only shared state is the
    immutable configuration, so one instance may serve several threads.
    """

    def __init__(self, config: Optional[FormatterConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the normalizer.

        Args:
            config: Configuration snapshot (defaults when omitted)
            logger: Optional logger instance
        """
        self.config = config or FormatterConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.logger)
        self.unwrapper = StringUnwrapper(
            parser=self.parser,
            max_depth=self.config.max_unwrap_depth,
            logger=self.logger
        )
        self.file_reader = FileReader(self.logger)
        self.file_writer = FileWriter(self.logger)

    def normalize_text(self, text: str) -> FormatResult:
        """
        Normalize a JSON document held in memory.

        Args:
            text: JSON text; surrounding whitespace is ignored

        Returns:
            FormatResult with the formatted text, or a failure for empty or
            invalid input
        """
        try:
            formatted = self._normalize(text)
        except ProcessingError as e:
            return self.error_handler.failure_result(e)

        return FormatResult(success=True, text=formatted)

    def normalize_file(self, path: str) -> FormatResult:
        """
        Normalize a JSON file in place.

        The file is only rewritten when the whole document was read, parsed
        and serialized successfully.

        Args:
            path: File to normalize

        Returns:
            FormatResult for the file
        """
        try:
            content = self.file_reader.read_text(path)
            formatted = self._normalize(content)
            self.file_writer.write_text_atomic(path, formatted)
        except ProcessingError as e:
            return self.error_handler.failure_result(e, path)

        self.logger.info(f"Formatted: {path}")
        return FormatResult(success=True, text=formatted, path=str(path))

    def serialize(self, value: Any) -> str:
        """Serialize a value with the configured indentation."""
        indent = self.config.indentation.indent_argument()
        if indent is None:
            return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        return json.dumps(value, indent=indent, ensure_ascii=False)

    def _normalize(self, text: str) -> str:
        try:
            data = self.parser.parse(text)
            return self.serialize(self.unwrapper.unwrap(data))
        except RecursionError:
            raise ProcessingError("Document is nested too deeply to normalize",
                                  ErrorType.RECURSION)
