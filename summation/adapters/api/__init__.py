# summation\adapters\api\__init__.py
"""
REST API Adapter.

This package acts as the HTTP entry point of the service.
It is built on FastAPI and follows the Hexagonal Architecture principles:
- It depends on `summation.core` (Use Cases & Models).
- It wires the `summation.shared.container` to inject dependencies.
- It does NOT contain business logic.
"""

from .main import create_app

__all__ = ["create_app"]
