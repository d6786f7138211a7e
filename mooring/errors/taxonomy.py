"""
errors/taxonomy.py - Error classification for the catenary engine.

Every failure the engine can report is one of four typed exceptions.
None of them is retryable: the computation is deterministic, so the
caller has to re-solicit corrected input instead.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from enum import Enum


class ErrorCategory(Enum):
    """Error categories."""
    # Input validation errors (1xxx)
    VALIDATION = "validation"

    # Bounds errors (3xxx)
    BOUNDS = "bounds"

    # Geometry errors (4xxx)
    GEOMETRY = "geometry"

    # Numerical errors (4xxx)
    NUMERICAL = "numerical"


class ErrorCode(Enum):
    """Specific error codes."""

    # Validation (1xxx)
    VAL_MISSING_FIELD = 1003
    VAL_TYPE_MISMATCH = 1004
    VAL_NOT_FINITE = 1005

    # Bounds (3xxx)
    BND_MINIMUM = 3002
    BND_MAXIMUM = 3003

    # Geometry (4xxx)
    GEO_LENGTH_DEPTH = 4101
    GEO_NEGATIVE_RADICAND = 4102

    # Numerical (4xxx)
    NUM_DEGENERATE = 4201


class CatenaryError(Exception):
    """
    Base class for structured engine errors.

    Carries the offending field and values so the caller can map the
    failure onto a form field without parsing the message.
    """

    code: ErrorCode = ErrorCode.VAL_MISSING_FIELD
    category: ErrorCategory = ErrorCategory.VALIDATION
    recoverable: bool = False

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        actual: Any = None,
        expected: Any = None,
        code: Optional[ErrorCode] = None,
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        self.actual_value = actual
        self.expected_value = expected
        if code is not None:
            self.code = code

    @property
    def kind(self) -> str:
        """Name of the error kind, e.g. 'GeometryError'."""
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "code": self.code.value,
            "category": self.category.value,
            "message": self.message,
            "field": self.field,
            "actual_value": self.actual_value,
            "expected_value": self.expected_value,
            "recoverable": self.recoverable,
        }


class ValidationError(CatenaryError, ValueError):
    """Input record failed validation."""
    category = ErrorCategory.VALIDATION


class MissingParameterError(ValidationError):
    """A required field is absent, non-numeric or non-finite."""
    code = ErrorCode.VAL_MISSING_FIELD
    category = ErrorCategory.VALIDATION


class DomainError(ValidationError):
    """A field violates its positivity or range constraint."""
    code = ErrorCode.BND_MINIMUM
    category = ErrorCategory.BOUNDS


class GeometryError(ValidationError):
    """The relationship between fields is physically impossible."""
    code = ErrorCode.GEO_LENGTH_DEPTH
    category = ErrorCategory.GEOMETRY


class DegenerateInputError(CatenaryError, ValueError):
    """A derived quantity is non-positive, so the operation is meaningless."""
    code = ErrorCode.NUM_DEGENERATE
    category = ErrorCategory.NUMERICAL
