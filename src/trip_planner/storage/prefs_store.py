# src/trip_planner/storage/prefs_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_PREFS_NAME = "trip_planning_prefs"


class PrefsStore:
    """
    Namespaced key-value file: <data_dir>/<name>.json holding {key: string}.
    Values of other types are kept on write but read as missing.

    - reads never raise on a missing or malformed file (treated as empty)
    - writes replace the whole file atomically (tmp + os.replace)
    - every call re-reads the file, so a write is visible to the next read
    """

    def __init__(self, data_dir: str | Path, name: str = DEFAULT_PREFS_NAME) -> None:
        if not name or not name.strip():
            raise ValueError("prefs name is required")
        self._name = name.strip()
        self._path = Path(data_dir) / f"{self._name}.json"
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.debug("PrefsStore ready path=%s", self._path)

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_all(self) -> dict[str, Any]:
        """Raw file contents (all value types kept, so writes never drop unrelated keys)."""
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text("utf-8")
        except UnicodeDecodeError:
            logger.warning("Prefs file %s is not valid UTF-8; treating as empty.", self._path)
            return {}
        except OSError:
            logger.exception("Failed to read prefs file %s", self._path)
            return {}
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Prefs file %s is not valid JSON; treating as empty.", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Prefs file %s is not a JSON object; treating as empty.", self._path)
            return {}
        return {str(k): v for k, v in data.items()}

    def _write_all(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)

    # ---- public API ----

    def get_string(self, key: str, default: str | None = None) -> str | None:
        value = self._read_all().get(key)
        # Only string values are meaningful in a prefs slot.
        return value if isinstance(value, str) else default

    def put_string(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug("Prefs %s: wrote key=%s (%d chars)", self._name, key, len(value))

    def contains(self, key: str) -> bool:
        return key in self._read_all()

    def remove(self, key: str) -> None:
        data = self._read_all()
        if key not in data:
            return
        del data[key]
        self._write_all(data)

    def clear(self) -> None:
        self._write_all({})
