"""File I/O operations for JSON Power Tools."""

from .file_reader import FileReader
from .file_writer import FileWriter

__all__ = ["FileReader", "FileWriter"]
