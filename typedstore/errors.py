from pathlib import Path
from typing import Optional


class StoreError(Exception):
    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class CreationError(StoreError, OSError):
    """The backing file does not exist and could not be created."""


class WriteError(StoreError, OSError):
    """The backing file could not be written during save."""


class DecodeError(StoreError, ValueError):
    """The backing file is not a JSON object."""


class EncodeError(StoreError, TypeError):
    """A stored value has no JSON representation."""
