"""Analyze relay: uploaded plant photo in, plain-text analysis out."""

import io
from pathlib import Path

from PIL import Image

from app.analysis.client_base import BaseAnalysisClient
from app.analysis.exceptions import InvalidImageError
from app.analysis.models import (
    AnalysisResponse,
    AnalysisResult,
    CandidateList,
    DirectText,
    UploadedImage,
)
from app.analysis.prompt_loader import load_prompt_template
from app.logging.logger import Log

NO_ANALYSIS_FOUND = "No analysis found."


def extract_text(response: AnalysisResponse) -> str:
    """Collapse any provider response shape into one plain-text result.

    Direct text wins; otherwise the first candidate's fragments are joined
    with newlines; anything else yields the fallback literal.
    """
    match response:
        case DirectText(text=text):
            return text
        case CandidateList(candidates=[first, *_]):
            return "\n".join(first)
        case _:
            return NO_ANALYSIS_FOUND


class PlantAnalyzer:
    """Describes a plant photo using a vision-capable AI provider."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._prompt = load_prompt_template(prompt_template_path)

    @property
    def model(self) -> str:
        return self._model

    def analyze(self, image: UploadedImage) -> AnalysisResult:
        """Run one analysis call and echo the image back as a data URI.

        Raises:
            InvalidImageError: if the payload is empty or not a decodable image.
            AnalysisNetworkError: if the provider call fails.
        """
        image = self._validate(image)
        image_base64 = image.to_base64()
        Log.info(
            f"Analyzing {len(image.data)} byte {image.mime_type} image "
            f"with model {self._model}"
        )

        response = self._client.generate(
            model=self._model,
            prompt=self._prompt,
            image=image,
            image_base64=image_base64,
        )
        Log.debug(f"AI response shape: {type(response).__name__}")

        text = extract_text(response)
        Log.info(f"Analysis complete: {len(text)} chars")
        return AnalysisResult(
            results=text,
            image=f"data:{image.mime_type};base64,{image_base64}",
        )

    @staticmethod
    def _validate(image: UploadedImage) -> UploadedImage:
        if not image.data:
            raise InvalidImageError("No file uploaded")
        try:
            with Image.open(io.BytesIO(image.data)) as img:
                detected_mime = Image.MIME.get(img.format or "", "")
                img.verify()
        except Exception as exc:
            raise InvalidImageError(f"Uploaded file is not a valid image: {exc}") from exc
        if image.mime_type.startswith("image/"):
            return image
        if not detected_mime:
            raise InvalidImageError("Uploaded file is not a valid image")
        return UploadedImage(data=image.data, mime_type=detected_mime)
