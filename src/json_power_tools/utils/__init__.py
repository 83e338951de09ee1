"""Utility functions for JSON Power Tools."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
