from __future__ import annotations


class LabUtilsError(Exception):
    """Base class for labutils errors."""


class InvalidArgumentError(LabUtilsError, ValueError):
    """Raised when a call is made with arguments outside its domain."""
