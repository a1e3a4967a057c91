"""Services layer - Application orchestration.

Available services:
- MapNavigationService: Builds and queries a road map
"""

from .navigator import MapNavigationService

__all__ = ["MapNavigationService"]
