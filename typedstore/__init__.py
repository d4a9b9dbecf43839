from .base import LoadResult, TypedStore
from .codec import JsonCodec
from .errors import CreationError, DecodeError, EncodeError, StoreError, WriteError
from .filesystem import FileSystem, LocalFileSystem
from .properties import Properties
from .settings import StoreSettings

__all__ = [
    "CreationError",
    "DecodeError",
    "EncodeError",
    "FileSystem",
    "JsonCodec",
    "LoadResult",
    "LocalFileSystem",
    "Properties",
    "StoreError",
    "StoreSettings",
    "TypedStore",
    "WriteError",
]
