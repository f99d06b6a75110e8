"""Configuration module"""

from .settings import Settings
from .messages import FailureMessages

__all__ = ["Settings", "FailureMessages"]
