import json
from typing import IO, Optional

from typedstore.errors import DecodeError, EncodeError
from typedstore.settings import StoreSettings
from typedstore.values import JsonValue


class JsonCodec:
    def __init__(self, settings: Optional[StoreSettings] = None):
        self._settings = settings or StoreSettings()

    def decode(self, stream: IO[str]) -> dict[str, JsonValue]:
        try:
            document = json.load(stream)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"malformed JSON: {exc}") from exc
        except RecursionError as exc:
            raise DecodeError("JSON nested too deeply to decode") from exc
        if not isinstance(document, dict):
            raise DecodeError(
                f"expected a JSON object at top level, got {type(document).__name__}"
            )
        return document

    def encode(self, values: dict[str, JsonValue]) -> str:
        try:
            return json.dumps(
                values,
                indent=self._settings.indent,
                ensure_ascii=self._settings.ensure_ascii,
                sort_keys=self._settings.sort_keys,
            )
        except (TypeError, ValueError) as exc:
            raise EncodeError(f"cannot encode store values: {exc}") from exc
        except RecursionError as exc:
            raise EncodeError("store values nested too deeply to encode") from exc
