from typing import Any

import openai

from app.analysis.client_base import BaseAnalysisClient
from app.intake.exceptions import AnalysisError, MalformedResponseError
from app.intake.models import EncodedImage
from app.logging.logger import Log


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on an OpenAI-compatible vision chat API."""

    TEMPERATURE = 0.4
    TOP_P = 1.0
    MAX_TOKENS = 2048

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: float | None = None,
        base_url: str | None = None,
    ) -> None:
        self._model = model
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def generate_content(self, *, prompt: str, image: EncodedImage) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                temperature=self.TEMPERATURE,
                top_p=self.TOP_P,
                max_tokens=self.MAX_TOKENS,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": prompt},
                            {"type": "image_url", "image_url": {"url": image.data_url}},
                        ],
                    }
                ],
            )
        except openai.APIStatusError as exc:
            Log.error(f"AI provider returned HTTP {exc.status_code}: {exc}")
            raise AnalysisError(
                self._error_message(exc.body), status_code=exc.status_code
            ) from exc
        except openai.APIError as exc:
            Log.error(f"AI provider error: {exc}")
            raise AnalysisError() from exc

        if not response.choices:
            raise MalformedResponseError()
        content = response.choices[0].message.content
        if not content:
            raise MalformedResponseError()
        return content

    @staticmethod
    def _error_message(body: Any) -> str | None:
        if not isinstance(body, dict):
            return None
        # Some servers return the bare error object, others wrap it in "error".
        error = body.get("error", body)
        if not isinstance(error, dict):
            return None
        message = error.get("message")
        return message if isinstance(message, str) and message else None
