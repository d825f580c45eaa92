from abc import ABC, abstractmethod

from app.intake.models import AnalysisResult, EncodedImage


class BaseAnalyzer(ABC):
    """Contract for all material analysis adapters."""

    @abstractmethod
    async def analyze(self, image: EncodedImage) -> AnalysisResult:
        """Identify materials in an image and describe their impact.

        Args:
            image: Encoded image to submit to the provider.

        Returns:
            AnalysisResult holding the provider's text.

        Raises:
            AnalysisError: when the provider rejects the request or errors.
            MalformedResponseError: when the response carries no usable text.
        """
