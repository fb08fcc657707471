"""Flat key/value JSON document holding chosen cutoff dates."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

JsonMap = dict[str, Any]


class StoreError(RuntimeError):
    """Raised when the JSON document cannot be read or written."""


@dataclass
class JsonFile:
    """A JSON object loaded from `path`; `data` is None if the file was missing."""

    path: Path
    data: JsonMap | None = None


def read_json_file(path: Path) -> JsonFile:
    """Load a JSON object from disk.

    A missing file is not an error and yields an empty JsonFile.

    Raises:
        StoreError: If the file is unreadable, not JSON, or not a JSON object.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return JsonFile(path=path)
    except OSError as e:
        raise StoreError(f"reading json file {path}") from e

    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise StoreError(f"invalid JSON in {path}") from e

    if not isinstance(value, dict):
        raise StoreError(f"unexpected JSON value: {value!r}")

    logger.info("Loaded %d entries from %s", len(value), path)
    return JsonFile(path=path, data=value)


def write_json_file(path: Path, data: JsonMap) -> None:
    """Rewrite `path` with `data` as pretty-printed JSON.

    Raises:
        StoreError: If the file cannot be written.
    """
    try:
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except OSError as e:
        raise StoreError(f"writing json file {path}") from e

    logger.info("Saved %d entries to %s", len(data), path)


def store_cutoff(json_file: JsonFile, key: str, date: str) -> JsonMap:
    """Set `key` to `date` in the loaded document and write it back."""
    data = dict(json_file.data or {})
    data[key] = date
    write_json_file(json_file.path, data)
    return data
