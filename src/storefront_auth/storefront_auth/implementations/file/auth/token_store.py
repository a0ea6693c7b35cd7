# ABOUTME: JSON file-backed implementation of AbstractTokenStore
# ABOUTME: Persists tokens durably across restarts with atomic replace-on-write

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Sequence

from loguru import logger

from storefront_auth.exceptions import StorageError
from storefront_auth.interfaces.auth import AbstractTokenStore


class FileTokenStore(AbstractTokenStore):
    """
    Durable token store keeping all keys in a single JSON object on disk.

    Features:
    - Survives process restarts
    - Atomic writes: a temporary file is written, fsynced and renamed over the
      previous file, so readers see either the old or the new contents
    - Owner-only file permissions
    - File I/O runs in worker threads to keep the event loop responsive
    - A missing file reads as an empty store

    Every read goes to disk, so tokens written by another process (for example
    a fresh login) are picked up without restarting.
    """

    def __init__(self, path: str | Path):
        """
        Initialize the store.

        Args:
            path: Location of the JSON file. Parent directories are created on first write.
        """
        self.path = Path(path).expanduser()
        self._write_lock = asyncio.Lock()

    async def get(self, key: str) -> str | None:
        data = await asyncio.to_thread(self._read)
        value = data.get(key)
        return value if isinstance(value, str) else None

    async def set(self, key: str, value: str) -> None:
        async with self._write_lock:
            data = await asyncio.to_thread(self._read)
            data[key] = value
            await asyncio.to_thread(self._write, data)

    async def remove(self, keys: Sequence[str]) -> None:
        async with self._write_lock:
            data = await asyncio.to_thread(self._read)
            if not any(key in data for key in keys):
                return
            for key in keys:
                data.pop(key, None)
            await asyncio.to_thread(self._write, data)

    async def keys(self) -> List[str]:
        data = await asyncio.to_thread(self._read)
        return list(data)

    def _read(self) -> Dict[str, object]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageError(
                message="Cannot read token store",
                code="READ_FAILED",
                details={"path": str(self.path), "error": str(e)},
            ) from e

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(
                message="Token store is corrupted",
                code="CORRUPTED",
                details={"path": str(self.path), "error": str(e)},
            ) from e

        if not isinstance(data, dict):
            raise StorageError(
                message="Token store is corrupted",
                code="CORRUPTED",
                details={"path": str(self.path), "found_type": type(data).__name__},
            )
        return data

    def _write(self, data: Dict[str, object]) -> None:
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            raise StorageError(
                message="Cannot write token store",
                code="WRITE_FAILED",
                details={"path": str(self.path), "error": str(e)},
            ) from e
        finally:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    logger.warning("Could not remove temporary token file", path=tmp_path)
