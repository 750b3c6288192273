"""
HTTP Interface

FastAPI application for the artifact store.
"""

from .rest import create_app

__all__ = ["create_app"]
