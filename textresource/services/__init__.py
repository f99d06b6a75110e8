"""Service modules"""

from .loader_service import ResourceTextLoader

__all__ = ["ResourceTextLoader"]
