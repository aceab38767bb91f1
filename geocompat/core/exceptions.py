"""
Custom exceptions for the geometry compatibility layer.

This module defines exception classes for caller-input errors (bad GeoJSON,
bad serialized payloads, out-of-range timestamp parts) and for precondition
violations such as asking a point for its polygon rings.
"""

from typing import Optional

from geocompat.core.enums import ErrorCode


class GeoCompatException(Exception):
    """Base exception class for all geometry compatibility errors"""
    error_code: Optional[ErrorCode] = None


class InvalidInputError(GeoCompatException):
    """
    Exception raised when caller-supplied input cannot be interpreted.

    Covers malformed GeoJSON text, JSON that does not describe a valid
    geometry, and malformed binary payloads. The message keeps the
    underlying parser's detail.
    """

    error_code = ErrorCode.INVALID_FUNCTION_ARGUMENT

    def __init__(self, subject: str, details: str):
        """
        Initialize InvalidInputError.

        Args:
            subject: What was being read (e.g. "GeoJSON")
            details: Underlying failure message
        """
        self.subject = subject
        self.details = details

        super().__init__(f"Invalid {subject}: {details}")


class TypeMismatchError(GeoCompatException):
    """
    Exception raised when a type-specific accessor gets the wrong geometry.

    This is a programming error at the call site, not a recoverable
    condition.
    """

    error_code = ErrorCode.TYPE_MISMATCH

    def __init__(self, expected: str, actual: str, operation: Optional[str] = None):
        """
        Initialize TypeMismatchError.

        Args:
            expected: Geometry type(s) the operation accepts
            actual: Geometry type that was passed
            operation: Name of the accessor (optional)
        """
        self.expected = expected
        self.actual = actual
        self.operation = operation

        message = f"Expected {expected} geometry but got {actual}"
        if operation:
            message = f"{operation}: {message}"

        super().__init__(message)
