import json
import math
import re
from typing import Any, Union


JsonValue = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?[fFdD]?")
_SPECIAL_FLOATS = {
    "NaN": math.nan,
    "+NaN": math.nan,
    "-NaN": math.nan,
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}


def canonical_text(value: Any) -> str:
    """Render a stored value the way it reads in the backing file.

    Strings come back unquoted, so a stored ``"42"`` and a stored ``42`` share
    the same text and both parse as numbers.
    """
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (bool, int, float)):
        return json.dumps(value)
    try:
        try:
            return json.dumps(value, separators=(",", ":"))
        except (TypeError, ValueError):
            return repr(value)
    except RecursionError:
        # Too deep to render; no number parser accepts this.
        return f"<{type(value).__name__}>"


def parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def parse_float(text: str) -> float:
    stripped = text.strip()
    if stripped in _SPECIAL_FLOATS:
        return _SPECIAL_FLOATS[stripped]
    if not _FLOAT_RE.fullmatch(stripped):
        raise ValueError(f"not a number: {text!r}")
    return float(stripped.rstrip("fFdD"))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def values_equal(a: Any, b: Any) -> bool:
    """Deep equality where booleans and numbers are distinct kinds.

    Plain ``==`` says ``True == 1``; a stored flag and a stored counter must
    not compare equal here.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if _is_number(a) or _is_number(b):
        return _is_number(a) and _is_number(b) and a == b
    if isinstance(a, dict) and isinstance(b, dict):
        if a.keys() != b.keys():
            return False
        return all(values_equal(a[key], b[key]) for key in a)
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (dict, list)) or isinstance(b, (dict, list)):
        return False
    return a == b


def freeze(value: Any):
    """Hashable rendering of a value, consistent with ``values_equal``."""
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, dict):
        return ("map", frozenset((key, freeze(item)) for key, item in value.items()))
    if isinstance(value, list):
        return ("list", tuple(freeze(item) for item in value))
    if _is_number(value):
        return ("number", value)
    try:
        hash(value)
    except TypeError:
        return ("repr", repr(value))
    return value
