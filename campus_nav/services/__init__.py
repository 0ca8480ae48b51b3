"""Services layer - Application orchestration.

Available services:
- NavigationService: Route queries, time estimates and map rendering
"""

from .navigation import NavigationService

__all__ = ["NavigationService"]
