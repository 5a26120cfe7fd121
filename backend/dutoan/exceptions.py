"""Custom exception hierarchy for dutoan."""

from __future__ import annotations


class DutoanError(Exception):
    """Base exception for all dutoan errors."""


class UnknownFieldError(DutoanError):
    """Raised when a form edit names a field the inputs record does not have."""


class InvalidSelectionError(DutoanError):
    """Raised when a selector edit carries a value outside its options."""
