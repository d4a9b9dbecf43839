import contextlib
import enum
import logging
from pathlib import Path
from typing import Any, Iterator, Optional, Union

from typedstore.codec import JsonCodec
from typedstore.errors import CreationError, DecodeError, EncodeError, WriteError
from typedstore.filesystem import FileSystem, LocalFileSystem
from typedstore.settings import StoreSettings
from typedstore.values import JsonValue, canonical_text, parse_float, parse_int


logger = logging.getLogger(__name__)

_MISSING = object()


class LoadResult(enum.Enum):
    LOADED = "loaded"
    MISSING = "missing"
    EMPTY = "empty"
    DECODE_ERROR = "decode_error"


class TypedStore:
    """Key-value store held in memory and persisted as one JSON object.

    Nothing is read at construction; call ``load()`` to pull the file in and
    ``save()`` to write the whole mapping back out. Typed ``opt_*`` readers
    never raise: a missing key, a value of the wrong kind or a string that
    does not parse all come back as the caller's default.
    """

    def __init__(
        self,
        path: Union[Path, str],
        *,
        settings: Optional[StoreSettings] = None,
        fs: Optional[FileSystem] = None,
        codec: Optional[JsonCodec] = None,
    ):
        self._path = Path(path)
        self._settings = settings or StoreSettings.from_env()
        self._fs = fs or LocalFileSystem()
        self._codec = codec or JsonCodec(self._settings)
        self._values: dict[str, JsonValue] = {}
        self.setup()

    def setup(self):
        """Make sure the backing file exists, without reading it."""
        if self._fs.exists(self._path):
            return
        try:
            self._fs.create_empty(self._path)
        except OSError as exc:
            raise CreationError(f"cannot create {self._path}: {exc}", self._path) from exc
        logger.debug("Created empty store file %s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def __repr__(self) -> str:
        return f"({len(self._values)})<{type(self).__name__}@{self._path}>"

    def load(self, strict: Optional[bool] = None) -> LoadResult:
        """Replace the in-memory values with the file content.

        A missing or zero-byte file loads as an empty store. Malformed JSON
        raises ``DecodeError`` when strict (the default comes from
        ``settings.strict_decode``), otherwise the store is reset to empty.
        """
        if strict is None:
            strict = self._settings.strict_decode
        loaded: dict[str, JsonValue] = {}
        try:
            if not self._fs.exists(self._path):
                result = LoadResult.MISSING
            elif self._fs.size(self._path) == 0:
                result = LoadResult.EMPTY
            else:
                with self._fs.open_for_read(self._path, self._settings.encoding) as f:
                    loaded = self._codec.decode(f)
                result = LoadResult.LOADED
        except FileNotFoundError:
            logger.warning("Store file %s vanished while loading", self._path)
            result = LoadResult.MISSING
        except DecodeError as exc:
            exc.path = self._path
            if strict:
                raise
            logger.warning("Ignoring unreadable store file %s: %s", self._path, exc)
            result = LoadResult.DECODE_ERROR
        # In place, so live key/entry views stay attached to this store.
        self._values.clear()
        self._values.update(loaded)
        logger.debug("Loaded %d keys from %s (%s)", len(self._values), self._path, result.value)
        return result

    def save(self):
        """Overwrite the backing file with every in-memory value."""
        self.setup()
        try:
            document = self._codec.encode(self._values)
        except EncodeError as exc:
            exc.path = self._path
            raise
        if self._settings.atomic_save:
            tmp = self._path.with_name(self._path.name + ".tmp")
            try:
                self._write(tmp, document)
                self._fs.replace(tmp, self._path)
            except OSError as exc:
                with contextlib.suppress(OSError):
                    self._fs.delete(tmp)
                raise WriteError(f"cannot write {self._path}: {exc}", self._path) from exc
        else:
            try:
                self._write(self._path, document)
            except OSError as exc:
                raise WriteError(f"cannot write {self._path}: {exc}", self._path) from exc
        logger.debug("Saved %d keys to %s", len(self._values), self._path)

    def _write(self, path: Path, document: str):
        with self._fs.open_for_write(path, self._settings.encoding) as f:
            f.write(document)

    def size(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __getitem__(self, key: str) -> JsonValue:
        value = self.opt_object(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: JsonValue):
        return self.set_value(key, value)

    def opt_object(self, key: str, default: Any = None) -> Any:
        return self._values[key] if key in self._values else default

    def opt_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self.opt_object(key, default)
        return value if isinstance(value, str) else default

    def opt_boolean(self, key: str, default: bool = False) -> bool:
        value = self.opt_object(key, default)
        return value if isinstance(value, bool) else default

    def opt_int(self, key: str, default: int = 0) -> int:
        if key in self._values:
            try:
                return parse_int(canonical_text(self._values[key]))
            except ValueError:
                pass
        return default

    def opt_double(self, key: str, default: float = 0.0) -> float:
        if key in self._values:
            try:
                return parse_float(canonical_text(self._values[key]))
            except ValueError:
                pass
        return default

    # Python floats are already double precision.
    opt_float = opt_double

    def opt_list(self, key: str, default: Optional[list] = None) -> Optional[list]:
        value = self.opt_object(key, default)
        return value if isinstance(value, list) else default

    def opt_map(self, key: str, default: Optional[dict] = None) -> Optional[dict]:
        value = self.opt_object(key, default)
        return value if isinstance(value, dict) else default

    def set_value(self, key: str, value: JsonValue):
        self._values[key] = value
