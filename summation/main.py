# summation/main.py
"""
ASGI entry point.

    uvicorn summation.main:app --host 0.0.0.0 --port 8000
"""

from summation.adapters.api import create_app
from summation.shared.config import settings

# Entry point for Uvicorn
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "summation.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
