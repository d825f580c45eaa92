import asyncio
import mimetypes
from pathlib import Path

from app.intake.exceptions import ReadError
from app.intake.models import EncodedImage, UploadedAsset
from app.logging.logger import Log

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def guess_media_type(filename: str) -> str:
    """Media type declared by the file extension, or a generic binary type."""
    media_type, _ = mimetypes.guess_type(filename)
    return media_type or DEFAULT_MEDIA_TYPE


class FileReader:
    """Reads a selected file and yields its encoded form in one step."""

    async def read(self, path: Path, media_type: str | None = None) -> UploadedAsset:
        """Read the whole file without blocking the event loop.

        Raises:
            ReadError: if the file is missing, unreadable, or empty.
        """
        try:
            data = await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            Log.error(f"Error reading file {path}: {exc}")
            raise ReadError() from exc
        if not data:
            Log.error(f"Error reading file {path}: file is empty")
            raise ReadError()
        return UploadedAsset(
            filename=path.name,
            media_type=media_type or guess_media_type(path.name),
            data=data,
        )

    async def read_encoded(
        self, path: Path, media_type: str | None = None
    ) -> tuple[UploadedAsset, EncodedImage]:
        asset = await self.read(path, media_type)
        image = EncodedImage.from_asset(asset)
        Log.debug(
            f"Encoded {asset.size_bytes} bytes of {asset.media_type} "
            f"into {len(image.payload)} base64 chars"
        )
        return asset, image
