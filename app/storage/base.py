from abc import ABC, abstractmethod


class BaseObjectStorage(ABC):
    """Contract for all object storage adapters.

    Paths are bucket-relative keys such as ``uploads/1700000000000-photo.jpg``.
    """

    @abstractmethod
    async def upload(self, path: str, data: bytes, content_type: str) -> None:
        """Store bytes under a new key.

        Raises:
            PersistenceError: if the object cannot be written.
        """

    @abstractmethod
    def get_public_url(self, path: str) -> str:
        """Return the public URL for a key. Pure; performs no I/O."""

    @abstractmethod
    async def move(self, source_path: str, dest_path: str) -> None:
        """Relocate an object to a new key.

        Raises:
            PersistenceError: if the object cannot be moved.
        """
