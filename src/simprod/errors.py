"""
Validation Errors
=================

Every load or construction failure raises a subclass of
SimprodValidationError. The subclass and its ``reason`` tell the caller
which rule was violated:

- ShapeError: wrong JSON type, wrong object size, malformed identifier
- SizeMismatchError: array length differs from the timeline length
- MissingKeyError: a required JSON key is absent
- UnresolvedReferenceError: a zone identifier is unknown to the scenario
- IdentifierMismatchError: an embedded zone id differs from the resolved zone
- CapacityExceededError: a scenario collection is full
- InvariantError: a value-level invariant does not hold
"""

from enum import Enum


class ErrorReason(Enum):
    """Discriminates the rule a validation failure violated."""
    SHAPE = "shape"
    SIZE_MISMATCH = "size_mismatch"
    MISSING_KEY = "missing_key"
    UNRESOLVED_REFERENCE = "unresolved_reference"
    IDENTIFIER_MISMATCH = "identifier_mismatch"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    INVARIANT = "invariant"


class SimprodValidationError(ValueError):
    """Base class of all simprod validation failures."""

    reason: ErrorReason = ErrorReason.SHAPE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.reason.value}] {self.message}"


class ShapeError(SimprodValidationError):
    reason = ErrorReason.SHAPE


class SizeMismatchError(SimprodValidationError):
    reason = ErrorReason.SIZE_MISMATCH


class MissingKeyError(SimprodValidationError):
    reason = ErrorReason.MISSING_KEY


class UnresolvedReferenceError(SimprodValidationError):
    reason = ErrorReason.UNRESOLVED_REFERENCE


class IdentifierMismatchError(SimprodValidationError):
    reason = ErrorReason.IDENTIFIER_MISMATCH


class CapacityExceededError(SimprodValidationError):
    reason = ErrorReason.CAPACITY_EXCEEDED


class InvariantError(SimprodValidationError):
    reason = ErrorReason.INVARIANT
