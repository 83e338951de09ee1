"""Formatter configuration and the process-wide active configuration."""

import dataclasses
import json
import logging
import os
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union
from .types import IndentationKind, ProcessingError, ErrorType
from .utils.validation import ValidationUtils


DEFAULT_MAX_DEPTH = 256
DEFAULT_IGNORED_FOLDERS = ("node_modules", "vendor", "composer", "packages")
DEFAULT_INDENTATION_SIZE = 2
DEFAULT_ALLOWED_EXTENSIONS = (".json",)

SETTINGS_PREFIX = "json-power-tools."

# json.dumps accepts any indent width; the conventional stringifier stops at 10.
MAX_INDENTATION_SIZE = 10

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Indentation:
    """Indentation style used when serializing documents."""
    kind: IndentationKind = IndentationKind.SPACES
    size: int = DEFAULT_INDENTATION_SIZE

    def indent_argument(self) -> Union[str, int, None]:
        """
        Get the ``indent`` argument for ``json.dumps``.

        Returns:
            A tab for tab indentation, the clamped width for spaces, or None
            (single-line output) when the width is below one
        """
        if self.kind == IndentationKind.TABS:
            return "\t"
        if self.size < 1:
            return None
        return min(self.size, MAX_INDENTATION_SIZE)

    def describe(self) -> str:
        return f"{self.kind.value}:{self.size}"


@dataclass(frozen=True)
class FormatterConfig:
    """
    Immutable snapshot of every tunable read by the engines.

    Folder names and extensions are matched case-insensitively. A
    ``max_unwrap_depth`` of None leaves embedded-JSON unwrapping unbounded.
    """
    max_depth: int = DEFAULT_MAX_DEPTH
    ignored_folders: Tuple[str, ...] = DEFAULT_IGNORED_FOLDERS
    indentation: Indentation = field(default_factory=Indentation)
    allowed_extensions: Tuple[str, ...] = DEFAULT_ALLOWED_EXTENSIONS
    max_unwrap_depth: Optional[int] = None

    def __post_init__(self):
        # Callers may hand in lists or sets; freeze them.
        object.__setattr__(self, "ignored_folders", tuple(self.ignored_folders))
        object.__setattr__(self, "allowed_extensions", tuple(self.allowed_extensions))

    @classmethod
    def create(cls,
               max_depth: Optional[int] = None,
               ignored_folders: Optional[Iterable[str]] = None,
               indentation_kind: Union[str, IndentationKind, None] = None,
               indentation_size: Optional[int] = None,
               allowed_extensions: Optional[Iterable[str]] = None,
               max_unwrap_depth: Optional[int] = None) -> "FormatterConfig":
        """Build a config, falling back to the defaults for omitted values."""
        return cls(
            max_depth=DEFAULT_MAX_DEPTH if max_depth is None else max_depth,
            ignored_folders=(DEFAULT_IGNORED_FOLDERS if ignored_folders is None
                             else tuple(ignored_folders)),
            indentation=Indentation(
                kind=IndentationKind.from_value(indentation_kind),
                size=DEFAULT_INDENTATION_SIZE if indentation_size is None else indentation_size
            ),
            allowed_extensions=(DEFAULT_ALLOWED_EXTENSIONS if allowed_extensions is None
                                else tuple(allowed_extensions)),
            max_unwrap_depth=max_unwrap_depth
        )

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "FormatterConfig":
        """
        Build a config from a settings mapping.

        Recognized keys are ``maxDepth``, ``ignoredFolders``,
        ``indentation.type``, ``indentation.size``, ``allowedExtensions`` and
        ``maxUnwrapDepth``. Indentation may also be given as a nested
        ``indentation`` object, and every key may carry the editor prefix
        ``json-power-tools.``.

        Args:
            settings: Mapping of setting names to values

        Returns:
            FormatterConfig with defaults for missing settings
        """
        flat: Dict[str, Any] = {}
        for key, value in settings.items():
            if key.startswith(SETTINGS_PREFIX):
                key = key[len(SETTINGS_PREFIX):]
            if key == "indentation" and isinstance(value, Mapping):
                for sub_key, sub_value in value.items():
                    flat[f"indentation.{sub_key}"] = sub_value
            else:
                flat[key] = value

        return cls.create(
            max_depth=flat.get("maxDepth"),
            ignored_folders=flat.get("ignoredFolders"),
            indentation_kind=flat.get("indentation.type"),
            indentation_size=flat.get("indentation.size"),
            allowed_extensions=flat.get("allowedExtensions"),
            max_unwrap_depth=flat.get("maxUnwrapDepth")
        )

    def is_folder_ignored(self, folder_name: str) -> bool:
        """Check whether a directory base name is on the ignore list."""
        lowered = folder_name.lower()
        return any(ignored.lower() == lowered for ignored in self.ignored_folders)

    def is_extension_allowed(self, file_path: str) -> bool:
        """Check whether a file's extension, including the dot, is allowed."""
        extension = os.path.splitext(file_path)[1].lower()
        return any(allowed.lower() == extension for allowed in self.allowed_extensions)

    def copy(self) -> "FormatterConfig":
        return dataclasses.replace(self)

    def describe(self) -> str:
        return (f"maxDepth={self.max_depth}, "
                f"ignoredFolders={len(self.ignored_folders)} types, "
                f"indentation={self.indentation.describe()}, "
                f"allowedExtensions={', '.join(self.allowed_extensions)}")


def load_settings(path: str) -> FormatterConfig:
    """
    Load a JSON settings file into a config.

    Args:
        path: Path to a JSON file holding a settings object

    Returns:
        FormatterConfig built from the file

    Raises:
        ProcessingError: If the file cannot be read or is not a JSON object
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            settings = json.load(f)
    except OSError as e:
        raise ProcessingError(f"Cannot read settings file {path}: {e}",
                              ErrorType.FILESYSTEM, path=path)
    except json.JSONDecodeError as e:
        raise ProcessingError(
            f"Invalid settings file {path}: {ValidationUtils.describe_decode_error(e)}",
            ErrorType.SYNTAX, path=path
        )

    if not isinstance(settings, dict):
        raise ProcessingError(f"Settings file {path} must contain a JSON object",
                              ErrorType.SYNTAX, path=path)

    return FormatterConfig.from_settings(settings)


class ConfigStore:
    """
    Holder for the active configuration.

    Replacing the configuration swaps the whole record; readers always get
    a consistent snapshot.
    """

    def __init__(self, config: Optional[FormatterConfig] = None,
                 logger: Optional[logging.Logger] = None):
        self._config = config or FormatterConfig()
        self._lock = threading.Lock()
        self.logger = logger or logging.getLogger(__name__)

    def replace(self, config: FormatterConfig) -> None:
        """Install a new active configuration."""
        with self._lock:
            self._config = config

        self.logger.info(f"Configuration updated: {config.describe()}")
        for warning in ValidationUtils.validate_config(config).warnings:
            self.logger.warning(warning)

    def set_config(self, **overrides: Any) -> None:
        """Replace the active configuration; omitted values use the defaults."""
        self.replace(FormatterConfig.create(**overrides))

    def get_config(self) -> FormatterConfig:
        with self._lock:
            return self._config.copy()


_default_store = ConfigStore()


def set_config(max_depth: Optional[int] = None,
               ignored_folders: Optional[Iterable[str]] = None,
               indentation_kind: Union[str, IndentationKind, None] = None,
               indentation_size: Optional[int] = None,
               allowed_extensions: Optional[Iterable[str]] = None,
               max_unwrap_depth: Optional[int] = None) -> None:
    """Replace the process-wide configuration."""
    _default_store.set_config(
        max_depth=max_depth,
        ignored_folders=ignored_folders,
        indentation_kind=indentation_kind,
        indentation_size=indentation_size,
        allowed_extensions=allowed_extensions,
        max_unwrap_depth=max_unwrap_depth
    )


def get_config() -> FormatterConfig:
    """Return a copy of the process-wide configuration."""
    return _default_store.get_config()


def reset_config() -> None:
    """Restore the process-wide configuration to the defaults."""
    _default_store.replace(FormatterConfig())
