# playstore/__init__.py
"""
Package entrypoint for the FastAPI application.

The application is built by a factory, so it can also be run with:
    uvicorn playstore:create_app --factory
although that skips the startup database probe done by ``python -m playstore``.
"""

from .main import create_app

__all__ = ["create_app"]
