# summation/core/domain/exceptions.py
from typing import Dict, Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Validation Errors ---

class ValidationError(DomainError):
    """
    Raised when a Sum request has a missing or non-numeric operand.

    `details` maps each offending field to a short description of the problem,
    e.g. {"a": "field required", "b": "must be a number"}.
    """
    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.details: Dict[str, str] = dict(details or {})
