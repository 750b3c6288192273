"""
Infrastructure Layer

Technical implementations: filesystem persistence, configuration, logging.
"""

from .persistence import AllowListAccessControl, StagedUpload, UploadPlacement, VersionResolver

__all__ = ["AllowListAccessControl", "VersionResolver", "UploadPlacement", "StagedUpload"]
