"""File I/O utilities"""

from typing import TextIO


class LocalFileStorage:
    """Storage facility backed by the local file system"""

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize local storage

        Args:
            encoding: Text encoding used for every file
        """
        self.encoding = encoding

    def open_for_read(self, name) -> TextIO:
        """
        Open an existing file for reading

        Args:
            name: Path to the file

        Returns:
            Open text handle; the caller closes it
        """
        # newline="" keeps line endings exactly as stored
        return open(name, "r", encoding=self.encoding, newline="")

    def create_empty(self, name) -> None:
        """
        Create an empty file, failing if something already exists at that path

        Args:
            name: Path to the file
        """
        with open(name, "x", encoding=self.encoding):
            pass

    def read_all(self, handle: TextIO) -> str:
        """
        Read the whole remaining content of an open handle

        Args:
            handle: Handle returned by open_for_read

        Returns:
            File content as string
        """
        return handle.read()
