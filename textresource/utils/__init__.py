"""Utility modules"""

from .file_utils import LocalFileStorage
from .result import Err, FailureKind, FailureReason, Ok, ResourceLoadError, Result

__all__ = [
    "LocalFileStorage",
    "Err",
    "FailureKind",
    "FailureReason",
    "Ok",
    "ResourceLoadError",
    "Result",
]
