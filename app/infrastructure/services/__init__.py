"""
Shared services.

Provides application-scoped provider functions for infrastructure singletons.
"""

from infrastructure.services.providers import get_settings

__all__ = [
    "get_settings",
]
