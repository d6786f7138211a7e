"""
errors/ - Error Taxonomy

Typed exceptions raised by the catenary engine.
"""

from .taxonomy import (
    ErrorCategory,
    ErrorCode,
    CatenaryError,
    ValidationError,
    MissingParameterError,
    DomainError,
    GeometryError,
    DegenerateInputError,
)

__all__ = [
    "ErrorCategory",
    "ErrorCode",
    "CatenaryError",
    "ValidationError",
    "MissingParameterError",
    "DomainError",
    "GeometryError",
    "DegenerateInputError",
]
