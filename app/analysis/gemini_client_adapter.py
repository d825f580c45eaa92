from typing import Any, ClassVar

import httpx

from app.analysis.client_base import BaseAnalysisClient
from app.intake.exceptions import AnalysisError, MalformedResponseError
from app.intake.models import EncodedImage
from app.logging.logger import Log


class GeminiClientAdapter(BaseAnalysisClient):
    """Analysis client built on the Gemini ``generateContent`` REST endpoint."""

    DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

    GENERATION_CONFIG: ClassVar[dict[str, float | int]] = {
        "temperature": 0.4,
        "topK": 32,
        "topP": 1,
        "maxOutputTokens": 2048,
    }

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/models/{self._model}:generateContent"

    def build_request_body(self, prompt: str, image: EncodedImage) -> dict[str, Any]:
        return {
            "contents": [
                {
                    "parts": [
                        {"text": prompt},
                        {
                            "inline_data": {
                                "mime_type": image.media_type,
                                "data": image.payload,
                            }
                        },
                    ]
                }
            ],
            "generationConfig": dict(self.GENERATION_CONFIG),
        }

    async def generate_content(self, *, prompt: str, image: EncodedImage) -> str:
        body = self.build_request_body(prompt, image)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.endpoint, params={"key": self._api_key}, json=body
                )
        except httpx.HTTPError as exc:
            Log.error(f"Gemini network error: {exc}")
            raise AnalysisError() from exc

        if response.is_error:
            message = self._error_message(response)
            Log.error(f"Gemini returned HTTP {response.status_code}: {response.text}")
            raise AnalysisError(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            Log.error(f"Gemini returned non-JSON body: {exc}")
            raise MalformedResponseError() from exc

        text = self._extract_text(data)
        if text is None:
            Log.error(f"Gemini response has no candidate text: {data!r}")
            raise MalformedResponseError()
        return text

    @staticmethod
    def _error_message(response: httpx.Response) -> str | None:
        try:
            data = response.json()
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        error = data.get("error")
        if not isinstance(error, dict):
            return None
        message = error.get("message")
        return message if isinstance(message, str) and message else None

    @staticmethod
    def _extract_text(data: Any) -> str | None:
        """Return ``candidates[0].content.parts[0].text`` or None if absent."""
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) and text else None
