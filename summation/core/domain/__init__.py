# summation\core\domain\__init__.py
"""
Domain Entities and Value Objects.

The request/response models of the Sum operation and the errors the core
raises when a request cannot be honoured.
"""

from .exceptions import DomainError, ValidationError
from .models import Number, SumRequest, SumResponse

__all__ = [
    "DomainError",
    "ValidationError",
    "Number",
    "SumRequest",
    "SumResponse",
]
