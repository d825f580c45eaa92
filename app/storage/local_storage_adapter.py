import asyncio
from pathlib import Path

from app.intake.exceptions import PersistenceError
from app.logging.logger import Log
from app.storage.base import BaseObjectStorage


class LocalStorageAdapter(BaseObjectStorage):
    """Object storage on the local filesystem, for development and tests.

    Objects live at {root}/{key}; public URLs are file:// URIs.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    async def upload(self, path: str, data: bytes, content_type: str) -> None:
        target = self._resolve(path)
        try:
            await asyncio.to_thread(self._write_new, target, data)
        except FileExistsError as exc:
            raise PersistenceError("The resource already exists") from exc
        except OSError as exc:
            raise PersistenceError(f"Failed to store {path}: {exc}") from exc
        Log.info(f"Stored {len(data)} bytes ({content_type}) at {target}")

    def get_public_url(self, path: str) -> str:
        return self._resolve(path).absolute().as_uri()

    async def move(self, source_path: str, dest_path: str) -> None:
        source = self._resolve(source_path)
        dest = self._resolve(dest_path)
        if not source.exists():
            raise PersistenceError(f"Object not found: {source_path}")
        try:
            await asyncio.to_thread(self._rename, source, dest)
        except OSError as exc:
            raise PersistenceError(f"Failed to move {source_path}: {exc}") from exc
        Log.info(f"Moved {source} to {dest}")

    def _resolve(self, path: str) -> Path:
        target = (self._root / path).resolve()
        if not target.is_relative_to(self._root.resolve()):
            raise PersistenceError(f"Invalid object path: {path}")
        return target

    @staticmethod
    def _write_new(target: Path, data: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("xb") as fh:
            fh.write(data)

    @staticmethod
    def _rename(source: Path, dest: Path) -> None:
        dest.parent.mkdir(parents=True, exist_ok=True)
        source.replace(dest)
