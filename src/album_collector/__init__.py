"""
Album Collector
REST and GraphQL services for a personal music collection
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
