from abc import ABCMeta, abstractmethod
from pathlib import Path
from typing import IO


class FileSystem(metaclass=ABCMeta):
    """The file operations a store needs, nothing more."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        ...

    @abstractmethod
    def size(self, path: Path) -> int:
        ...

    @abstractmethod
    def create_empty(self, path: Path):
        ...

    @abstractmethod
    def open_for_read(self, path: Path, encoding: str) -> IO[str]:
        ...

    @abstractmethod
    def open_for_write(self, path: Path, encoding: str) -> IO[str]:
        ...

    @abstractmethod
    def replace(self, src: Path, dst: Path):
        ...

    @abstractmethod
    def delete(self, path: Path):
        """Remove a file if it exists."""


class LocalFileSystem(FileSystem):
    def exists(self, path: Path) -> bool:
        return path.is_file()

    def size(self, path: Path) -> int:
        return path.stat().st_size

    def create_empty(self, path: Path):
        # Parent directories are not created; a missing parent is an invalid path.
        with path.open("at") as f:
            f.write("")

    def open_for_read(self, path: Path, encoding: str) -> IO[str]:
        return path.open("rt", encoding=encoding)

    def open_for_write(self, path: Path, encoding: str) -> IO[str]:
        return path.open("wt", encoding=encoding)

    def replace(self, src: Path, dst: Path):
        src.replace(dst)

    def delete(self, path: Path):
        path.unlink(missing_ok=True)
