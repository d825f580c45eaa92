from pathlib import Path

from app.config.settings import Settings
from app.storage.base import BaseObjectStorage
from app.storage.local_storage_adapter import LocalStorageAdapter
from app.storage.supabase_storage_adapter import SupabaseStorageAdapter


class StorageFactory:
    """Creates the correct object storage adapter based on settings."""

    ENGINES: tuple[str, ...] = ("local", "supabase")

    @classmethod
    def create(cls, settings: Settings) -> BaseObjectStorage:
        engine = settings.storage_engine.lower()
        if engine == "local":
            return LocalStorageAdapter(root=Path(settings.storage_local_root))
        if engine == "supabase":
            if not settings.storage_url:
                raise ValueError("storage_url is required for storage_engine=supabase")
            return SupabaseStorageAdapter(
                url=settings.storage_url,
                api_key=settings.storage_api_key,
                bucket=settings.storage_bucket,
                timeout_seconds=settings.storage_timeout_seconds,
            )
        raise ValueError(
            f"Unknown storage engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
