"""
Application Services
"""

from .store_service import Store

__all__ = ["Store"]
