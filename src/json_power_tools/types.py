"""Core type definitions for JSON Power Tools."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union


class IndentationKind(Enum):
    """Enumeration of supported indentation styles."""
    SPACES = "spaces"
    TABS = "tabs"

    @classmethod
    def from_value(cls, value: Union[str, "IndentationKind", None]) -> "IndentationKind":
        """Map a settings value to a kind; anything but "tabs" means spaces."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() == cls.TABS.value:
            return cls.TABS
        return cls.SPACES


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    FILESYSTEM = "filesystem"
    RECURSION = "recursion"
    UNEXPECTED = "unexpected"


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType,
                 path: Optional[str] = None, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.path = path
        self.context = context


@dataclass
class FormatResult:
    """Result of formatting a piece of text or a single file."""
    success: bool
    text: Optional[str] = None
    path: Optional[str] = None
    error: Optional[ProcessingError] = None

    @property
    def error_type(self) -> Optional[ErrorType]:
        return self.error.error_type if self.error else None


@dataclass
class BulkFormatResult:
    """Result of formatting every candidate file under a directory."""
    total_files: int
    success_count: int
    error_count: int
    duration: float
    failed_files: List[str] = field(default_factory=list)

    @property
    def duration_label(self) -> str:
        return f"{self.duration:.2f}s"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of a validation pass."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


# Abstract base classes for interfaces

class FileDiscoveryInterface(ABC):
    """Abstract interface for the directory traversal engine."""

    @abstractmethod
    def discover_files(self, root_path: str, current_depth: int = 0) -> List[str]:
        """Enumerate candidate files below root_path."""
        pass


class NormalizerInterface(ABC):
    """Abstract interface for the normalization engine."""

    @abstractmethod
    def normalize_text(self, text: str) -> FormatResult:
        """Parse, unwrap and re-serialize a JSON document."""
        pass

    @abstractmethod
    def normalize_file(self, path: str) -> FormatResult:
        """Normalize a JSON file in place."""
        pass


class JSONFormatterInterface(ABC):
    """Abstract interface for the caller-facing formatter."""

    @abstractmethod
    def format_text(self, text: str) -> Optional[str]:
        """Format JSON text, returning None on failure."""
        pass

    @abstractmethod
    def format_file(self, path: str) -> bool:
        """Format a file in place."""
        pass

    @abstractmethod
    def format_tree(self, root_path: str) -> BulkFormatResult:
        """Format every candidate file under root_path."""
        pass

    @abstractmethod
    def enumerate_files(self, root_path: str) -> List[str]:
        """List candidate files under root_path."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle processing errors."""
        pass

    @abstractmethod
    def failure_result(self, error: ProcessingError,
                       path: Optional[str] = None) -> FormatResult:
        """Convert an internal error into a failed result."""
        pass
