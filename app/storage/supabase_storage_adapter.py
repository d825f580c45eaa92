from typing import Any
from urllib.parse import quote

import httpx

from app.intake.exceptions import PersistenceError
from app.logging.logger import Log
from app.storage.base import BaseObjectStorage


class SupabaseStorageAdapter(BaseObjectStorage):
    """Object storage backed by the Supabase Storage REST API."""

    def __init__(
        self,
        *,
        url: str,
        api_key: str,
        bucket: str,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = f"{url.rstrip('/')}/storage/v1"
        self._api_key = api_key
        self._bucket = bucket
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    async def upload(self, path: str, data: bytes, content_type: str) -> None:
        await self._request(
            "POST",
            f"/object/{self._bucket}/{quote(path)}",
            content=data,
            headers={"Content-Type": content_type, "x-upsert": "false"},
        )
        Log.info(f"Uploaded {len(data)} bytes to {self._bucket}/{path}")

    def get_public_url(self, path: str) -> str:
        return f"{self._base_url}/object/public/{self._bucket}/{quote(path)}"

    async def move(self, source_path: str, dest_path: str) -> None:
        await self._request(
            "POST",
            "/object/move",
            json={
                "bucketId": self._bucket,
                "sourceKey": source_path,
                "destinationKey": dest_path,
            },
        )
        Log.info(f"Moved {self._bucket}/{source_path} to {dest_path}")

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        request_headers = {
            "Authorization": f"Bearer {self._api_key}",
            "apikey": self._api_key,
            **(headers or {}),
        }
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method, endpoint, headers=request_headers, **kwargs
                )
        except httpx.HTTPError as exc:
            Log.error(f"Storage network error on {endpoint}: {exc}")
            raise PersistenceError(f"Storage request failed: {exc}") from exc

        if response.is_error:
            message = self._error_message(response)
            Log.error(f"Storage returned HTTP {response.status_code} on {endpoint}: {message}")
            raise PersistenceError(message)
        return response

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        fallback = f"Storage request failed with HTTP {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            return fallback
        if not isinstance(data, dict):
            return fallback
        for key in ("message", "error"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
        return fallback
