"""
Deploy-tree helpers for Bundlio.

This module copies project resources into the deploy directory.
"""

from .resource_copier import ResourceCopier

__all__ = [
    "ResourceCopier",
]
