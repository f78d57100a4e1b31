# src/taskpad/storage/json_file.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """
    Key-value storage backed by a single JSON object on disk.

    Every `set` rewrites the whole file through a temp file + os.replace,
    so a crash never leaves a half-written document behind.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("JsonFileStorage ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except ValueError:
            logger.exception("Storage file %s is not valid JSON; treating as empty.", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold an object; treating as empty.", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)
        logger.debug("Stored key=%s (%d chars) in %s", key, len(value), self._path)
