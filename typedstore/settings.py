import os
from dataclasses import dataclass
from typing import Optional


def _env_bool(var: str, default: bool) -> bool:
    v = os.getenv(var)
    if v is None or not v.strip():
        return default
    s = v.strip().lower()
    if s in ("1", "true", "t", "yes", "y", "on"):
        return True
    if s in ("0", "false", "f", "no", "n", "off"):
        return False
    raise ValueError(f"{var}: boolean value expected, got {v!r}")


def _env_indent(var: str, default: Optional[int]) -> Optional[int]:
    v = os.getenv(var)
    if v is None:
        return default
    if not v.strip():
        return None
    try:
        return int(v)
    except ValueError:
        raise ValueError(f"{var}: integer expected, got {v!r}") from None


@dataclass(frozen=True)
class StoreSettings:
    """Store settings. A store built without any calls ``StoreSettings.from_env()``."""

    encoding: str = "utf-8"
    indent: Optional[int] = None
    ensure_ascii: bool = False
    sort_keys: bool = False
    # Malformed JSON on load raises DecodeError instead of resetting to empty.
    strict_decode: bool = True
    # Write to a sibling temp file and rename it over the target.
    atomic_save: bool = True

    @classmethod
    def from_env(cls) -> "StoreSettings":
        default = cls()
        return cls(
            encoding=os.getenv("TYPEDSTORE_ENCODING") or default.encoding,
            indent=_env_indent("TYPEDSTORE_INDENT", default.indent),
            ensure_ascii=_env_bool("TYPEDSTORE_ENSURE_ASCII", default.ensure_ascii),
            sort_keys=_env_bool("TYPEDSTORE_SORT_KEYS", default.sort_keys),
            strict_decode=_env_bool("TYPEDSTORE_STRICT_DECODE", default.strict_decode),
            atomic_save=_env_bool("TYPEDSTORE_ATOMIC_SAVE", default.atomic_save),
        )
