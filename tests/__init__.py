# tests\__init__.py
"""
Test Suite for the Summation Service.

Organization:
- `core`: Tests for the Sum use case and domain models (no transport).
- `adapters`: Tests for the HTTP API and CLI adapters.
- `shared`: Tests for configuration, logging and telemetry helpers.
"""
