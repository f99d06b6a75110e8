"""Text resource loading service"""

import logging
import os
from typing import Optional

from textresource.config.settings import Settings
from textresource.utils.file_utils import LocalFileStorage
from textresource.utils.result import Err, FailureKind, FailureReason, Ok, Result

logger = logging.getLogger(__name__)


class ResourceTextLoader:
    """
    Service for reading the text content of a named resource

    Every storage failure is returned as an Err holding a FailureReason;
    what to do about it is left to the caller. Each call opens, reads and
    closes the resource once, with no caching between calls. Concurrent
    callers working on the same name are not coordinated.
    """

    def __init__(self, storage=None, encoding: Optional[str] = None):
        """
        Initialize loader

        Args:
            storage: Object providing open_for_read, create_empty and read_all
                (default: LocalFileStorage)
            encoding: Text encoding for the default storage (default: from settings)
        """
        self.storage = storage or LocalFileStorage(encoding or Settings.ENCODING)

    def load_or_create(self, name) -> Result[str]:
        """
        Load a resource, creating it empty if it does not exist

        Args:
            name: Resource name (file path)

        Returns:
            Ok with the content ("" for a newly created resource),
            or Err with CREATE_FAILED, READ_FAILED or OTHER
        """
        opened = self._open(name)
        if opened.is_err():
            if opened.kind is not FailureKind.NOT_FOUND:
                return opened
            return self._create(name)
        return self._read(name, opened.value)

    def load_strict(self, name) -> Result[str]:
        """
        Load a resource without any recovery

        Args:
            name: Resource name (file path)

        Returns:
            Ok with the content, or Err with NOT_FOUND, READ_FAILED or OTHER
        """
        opened = self._open(name)
        if opened.is_err():
            return opened
        return self._read(name, opened.value)

    def _open(self, name) -> Result:
        logger.debug("Opening resource %s", name)
        try:
            return Ok(self.storage.open_for_read(name))
        except FileNotFoundError as e:
            return self._fail(FailureKind.NOT_FOUND, name, e)
        except PermissionError as e:
            # Only a resource that exists can be refused for reading
            kind = FailureKind.READ_FAILED if os.path.exists(name) else FailureKind.OTHER
            return self._fail(kind, name, e)
        except (OSError, ValueError) as e:
            return self._fail(FailureKind.OTHER, name, e)

    def _create(self, name) -> Result[str]:
        try:
            self.storage.create_empty(name)
        except (OSError, ValueError) as e:
            return self._fail(FailureKind.CREATE_FAILED, name, e)
        logger.info("Created empty resource %s", name)
        # Nothing to read back from a file that was just created
        return Ok("")

    def _read(self, name, handle) -> Result[str]:
        with handle:
            try:
                content = self.storage.read_all(handle)
            except (OSError, ValueError) as e:
                # ValueError covers UnicodeDecodeError
                return self._fail(FailureKind.READ_FAILED, name, e)
        logger.debug("Read resource %s (%d characters)", name, len(content))
        return Ok(content)

    @staticmethod
    def _fail(kind: FailureKind, name, error: BaseException) -> Err:
        reason = FailureReason.from_error(kind, name, error)
        logger.warning("Failed to load resource: %s", reason)
        return Err(reason)
