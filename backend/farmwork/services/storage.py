import json
import logging
import os
from pathlib import Path
from typing import Protocol

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Durable string store used for the auth token and user snapshot."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def remove(self, key: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class JsonFileStore:
    """Key-value store persisted as a single JSON object on disk.

    Writes go through a temp file and ``os.replace`` so a crash never leaves
    a half-written store behind. An unreadable file is treated as empty.
    """

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)

    async def _load(self) -> dict[str, str]:
        if not await aiofiles.os.path.exists(self.path):
            return {}
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                data = json.loads(await f.read())
        except (OSError, ValueError):
            logger.warning("Session store %s is unreadable, starting empty", self.path)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    async def _save(self, data: dict[str, str]) -> None:
        await aiofiles.os.makedirs(self.path.parent, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
            await f.write(json.dumps(data))
        await aiofiles.os.replace(tmp_path, self.path)

    async def get(self, key: str) -> str | None:
        return (await self._load()).get(key)

    async def set(self, key: str, value: str) -> None:
        data = await self._load()
        data[key] = value
        await self._save(data)

    async def remove(self, key: str) -> None:
        data = await self._load()
        if data.pop(key, None) is not None:
            await self._save(data)
