"""Storage doubles used to simulate failures the local file system rarely produces."""

import io
from pathlib import Path

from textresource.utils.file_utils import LocalFileStorage


# chmod cannot deny reads when the suite runs as root, so denial is simulated here
class DeniedOpenStorage(LocalFileStorage):
    """Storage whose files exist but may not be opened for reading."""

    def open_for_read(self, name):
        if not Path(name).exists():
            raise FileNotFoundError(2, "No such file or directory", str(name))
        raise PermissionError(13, "Permission denied", str(name))


class BrokenReadStorage(LocalFileStorage):
    """Storage whose reads fail after a successful open."""

    def __init__(self):
        super().__init__()
        self.handles = []

    def open_for_read(self, name):
        handle = super().open_for_read(name)
        self.handles.append(handle)
        return handle

    def read_all(self, handle):
        raise OSError(5, "Input/output error")


class DeniedCreateStorage(LocalFileStorage):
    """Storage that refuses to create anything."""

    def create_empty(self, name):
        raise PermissionError(13, "Permission denied", str(name))


class MemoryStorage:
    """In-memory storage with the same three primitives."""

    def __init__(self, files=None):
        self.files = dict(files or {})
        self.created = []

    def open_for_read(self, name):
        if name not in self.files:
            raise FileNotFoundError(2, "No such file or directory", name)
        return io.StringIO(self.files[name])

    def create_empty(self, name):
        if name in self.files:
            raise FileExistsError(17, "File exists", name)
        self.files[name] = ""
        self.created.append(name)

    def read_all(self, handle):
        return handle.read()
