import httpx
import openai

from app.analysis.client_base import BaseAnalysisClient
from app.analysis.exceptions import AnalysisError, AnalysisNetworkError
from app.analysis.models import (
    AnalysisResponse,
    CandidateList,
    Unrecognized,
    UploadedImage,
)


class OpenAIClientAdapter(BaseAnalysisClient):
    """Vision AI client adapter built on OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def generate(
        self,
        *,
        model: str,
        prompt: str,
        image: UploadedImage,
        image_base64: str,
    ) -> AnalysisResponse:
        try:
            response = self._client.chat.completions.create(
                model=model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": prompt},
                            {
                                "type": "image_url",
                                "image_url": {
                                    "url": f"data:{image.mime_type};base64,{image_base64}",
                                },
                            },
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(
                f"AI provider API error: {exc}"
            ) from exc
        except Exception as exc:
            raise AnalysisError(f"AI provider call failed: {exc}") from exc

        if not response.choices:
            return Unrecognized(raw=response)
        return CandidateList(
            candidates=[[choice.message.content or ""] for choice in response.choices]
        )
