# summation\core\use_cases\__init__.py
"""
Core Use Cases (Application Logic).

Each use case represents a single business action and is responsible for:
1. Validating the incoming request.
2. Computing the result.
3. Returning Domain Entities (or raising Domain Errors).
"""

from .compute_sum import ComputeSum

__all__ = [
    "ComputeSum",
]
