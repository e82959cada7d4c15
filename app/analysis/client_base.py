from abc import ABC, abstractmethod

from app.analysis.models import AnalysisResponse, UploadedImage


class BaseAnalysisClient(ABC):
    """Contract for provider-specific vision AI clients."""

    @abstractmethod
    def generate(
        self,
        *,
        model: str,
        prompt: str,
        image: UploadedImage,
        image_base64: str,
    ) -> AnalysisResponse:
        """Send the prompt and inline image, return the classified provider response.

        Raises:
            AnalysisNetworkError: on transport, timeout or provider API failures.
        """
