"""Example analysis client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

from typing import ClassVar

from app.analysis.client_base import BaseAnalysisClient
from app.analysis.models import AnalysisResponse, DirectText, UploadedImage


class ExampleClientAdapter(BaseAnalysisClient):
    """Example adapter that returns a fixed six-section plant analysis.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    DEFAULT_ANALYSIS: ClassVar[str] = "\n".join([
        "Plant Name: Snake Plant",
        "Scientific Name: Dracaena trifasciata",
        "Description: Stiff, upright sword-shaped leaves with dark green bands "
        "and yellow margins.",
        "Ideal Weather & Environment: Warm indoor rooms between 18 and 27 C.",
        "Best Growing Conditions:",
        "Light: Bright indirect light, tolerates low light.",
        "Watering: Water every 2-3 weeks, letting the soil dry out in between.",
        "Soil: Well-draining cactus or succulent mix.",
        "Humidity: Average household humidity is fine.",
        "Summary: A forgiving plant for beginners. Avoid overwatering.",
    ])

    def __init__(self) -> None:
        pass

    def generate(
        self,
        *,
        model: str,
        prompt: str,
        image: UploadedImage,
        image_base64: str,
    ) -> AnalysisResponse:
        _ = model, prompt, image, image_base64
        return DirectText(text=self.DEFAULT_ANALYSIS)
