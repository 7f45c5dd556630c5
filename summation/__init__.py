# summation\__init__.py
"""
Summation Service.

A stateless request/response service that adds two numbers, built as a
small Hexagonal Architecture (Ports & Adapters) application:
the pure Sum use case lives in `summation.core`, the HTTP and CLI
transports live in `summation.adapters`.
"""

__version__ = "1.0.0"
