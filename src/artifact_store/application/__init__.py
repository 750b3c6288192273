"""
Application Layer

Composes the domain and persistence adapters into the store operations.
"""

from .services.store_service import Store

__all__ = ["Store"]
