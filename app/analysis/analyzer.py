"""AI-powered material analyzer."""

from app.analysis.base import BaseAnalyzer
from app.analysis.client_base import BaseAnalysisClient
from app.analysis.sections import missing_sections
from app.intake.exceptions import MalformedResponseError
from app.intake.models import AnalysisResult, EncodedImage
from app.logging.logger import Log


class Analyzer(BaseAnalyzer):
    """Sends one image with the fixed instruction prompt to a provider client."""

    def __init__(self, *, client: BaseAnalysisClient, prompt: str) -> None:
        self._client = client
        self._prompt = prompt

    async def analyze(self, image: EncodedImage) -> AnalysisResult:
        Log.debug(f"Analysis prompt:\n{self._prompt}")
        text = await self._client.generate_content(prompt=self._prompt, image=image)
        if not text or not text.strip():
            raise MalformedResponseError()
        Log.debug(f"AI raw response:\n{text}")

        missing = missing_sections(text)
        if missing:
            Log.warning(f"Analysis is missing sections: {', '.join(missing)}")

        Log.info(f"Analysis complete: {len(text)} chars")
        return AnalysisResult(text=text)
