# summation\adapters\__init__.py
"""
Infrastructure Adapters.

These adapters connect the Sum use case to the outside world:
- `api`: Primary Adapter (Driving) - FastAPI web server.
- `cli`: Primary Adapter (Driving) - command line.

In Hexagonal Architecture, dependencies point INWARD. These modules depend on
`summation.core`, but `summation.core` never imports from here.
"""
