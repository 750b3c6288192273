"""
Persistence Infrastructure

Filesystem adapters for access control, version resolution and upload
placement.
"""

from .access_control import AllowListAccessControl
from .upload_placement import StagedUpload, UploadPlacement
from .version_resolver import VersionResolver

__all__ = ["AllowListAccessControl", "VersionResolver", "UploadPlacement", "StagedUpload"]
