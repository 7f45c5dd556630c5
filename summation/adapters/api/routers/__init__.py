# summation\adapters\api\routers\__init__.py
"""
API Route Definitions.

This package contains the route handlers (controllers) organized by area.
- `sum`: The Sum operation (Core Value).
- `health`: System health checks.

Each module exposes a `router`; `summation.adapters.api.main` imports the
modules themselves so the container can wire their `@inject` handlers.
"""
