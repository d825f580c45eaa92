from abc import ABC, abstractmethod

from app.intake.models import EncodedImage


class BaseAnalysisClient(ABC):
    """Contract for provider-specific multimodal inference clients."""

    @abstractmethod
    async def generate_content(self, *, prompt: str, image: EncodedImage) -> str:
        """Return the generated text for one prompt + image request."""
