from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from app.analysis.client_base import BaseAnalysisClient
from app.analysis.exceptions import AnalysisError, AnalysisNetworkError
from app.analysis.models import (
    AnalysisResponse,
    CandidateList,
    DirectText,
    Unrecognized,
    UploadedImage,
)


class GeminiClientAdapter(BaseAnalysisClient):
    """Vision AI client adapter built on the Google Gen AI SDK."""

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_seconds * 1000),
        )

    def generate(
        self,
        *,
        model: str,
        prompt: str,
        image: UploadedImage,
        image_base64: str,
    ) -> AnalysisResponse:
        _ = image_base64  # the SDK encodes inline bytes itself
        try:
            response = self._client.models.generate_content(
                model=model,
                contents=[
                    prompt,
                    types.Part.from_bytes(data=image.data, mime_type=image.mime_type),
                ],
            )
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except errors.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}") from exc
        except Exception as exc:
            raise AnalysisError(f"AI provider call failed: {exc}") from exc
        return self._classify(response)

    @staticmethod
    def _classify(response: Any) -> AnalysisResponse:
        text = getattr(response, "text", None)
        if isinstance(text, str) and text:
            return DirectText(text=text)
        candidates = getattr(response, "candidates", None) or []
        if candidates:
            return CandidateList(
                candidates=[_candidate_fragments(c) for c in candidates]
            )
        return Unrecognized(raw=response)


def _candidate_fragments(candidate: Any) -> list[str]:
    content = getattr(candidate, "content", None)
    parts = getattr(content, "parts", None) or []
    return [getattr(part, "text", None) or "" for part in parts]
