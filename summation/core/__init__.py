# summation\core\__init__.py
"""
Core Domain Layer.

This package contains the pure business logic of the service.
- No dependencies on web frameworks (FastAPI, Starlette).
- No dependencies on the command line or process environment.
- Every operation is a pure function of its inputs.
"""
