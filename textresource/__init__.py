"""Read-or-create access to text resources with typed failure reasons"""

from textresource.utils import (
    Err,
    FailureKind,
    FailureReason,
    LocalFileStorage,
    Ok,
    ResourceLoadError,
    Result,
)
from textresource.config import Settings
from textresource.services import ResourceTextLoader
from textresource.handlers.resource_handler import ResourceHandler

__all__ = [
    "Err",
    "FailureKind",
    "FailureReason",
    "LocalFileStorage",
    "Ok",
    "ResourceHandler",
    "ResourceLoadError",
    "ResourceTextLoader",
    "Result",
    "Settings",
]
