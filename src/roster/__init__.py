"""
Roster Backend
GraphQL API for user signup/login and employee records
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
