"""Example analysis client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

from app.analysis.client_base import BaseAnalysisClient
from app.intake.models import EncodedImage


class ExampleClientAdapter(BaseAnalysisClient):
    """Example adapter that returns a fixed four-section analysis.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE = (
        "1) Materials Identified\n"
        "Polyethylene terephthalate (PET) bottle with a polypropylene cap.\n"
        "2) Environmental Impact\n"
        "Fossil-based plastics; PET is widely recyclable, PP caps less so.\n"
        "3) CO2 Emissions Estimate\n"
        "Roughly 80-100 g CO2e per 500 ml bottle over its life cycle.\n"
        "4) Sustainable Alternatives\n"
        "Refillable stainless steel or glass bottles; rPET packaging."
    )

    def __init__(self, response: str = DEFAULT_RESPONSE) -> None:
        self._response = response

    async def generate_content(self, *, prompt: str, image: EncodedImage) -> str:
        _ = prompt, image
        return self._response
