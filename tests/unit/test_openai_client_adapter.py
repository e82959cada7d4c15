from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from app.analysis.exceptions import AnalysisError, AnalysisNetworkError
from app.analysis.models import CandidateList, Unrecognized, UploadedImage
from app.analysis.openai_client_adapter import OpenAIClientAdapter


def _make_mock_response(*contents: str | None) -> MagicMock:
    choices = []
    for content in contents:
        choice = MagicMock()
        choice.message.content = content
        choices.append(choice)
    response = MagicMock()
    response.choices = choices
    return response


def _generate(mock_client: MagicMock) -> object:
    with patch(
        "app.analysis.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        adapter = OpenAIClientAdapter(
            api_key="k",
            timeout_seconds=30,
            base_url=None,
        )
        return adapter.generate(
            model="m",
            prompt="Describe the plant",
            image=UploadedImage(data=b"\x89PNG", mime_type="image/png"),
            image_base64="iVBORw==",
        )


class TestOpenAIClientAdapter:
    def test_choices_become_candidate_list(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(
            "Plant Name: Fern", "Plant Name: Ivy"
        )
        result = _generate(mock_client)
        assert result == CandidateList(candidates=[["Plant Name: Fern"], ["Plant Name: Ivy"]])

    def test_empty_content_becomes_empty_fragment(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        result = _generate(mock_client)
        assert result == CandidateList(candidates=[[""]])

    def test_no_choices_is_unrecognized(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response()
        result = _generate(mock_client)
        assert isinstance(result, Unrecognized)

    def test_sends_image_as_data_uri(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("ok")
        _generate(mock_client)
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        content = kwargs["messages"][0]["content"]
        assert content[0] == {"type": "text", "text": "Describe the plant"}
        assert content[1]["image_url"]["url"] == "data:image/png;base64,iVBORw=="

    def test_disables_sdk_retries(self) -> None:
        with patch("app.analysis.openai_client_adapter.openai.OpenAI") as mock_cls:
            OpenAIClientAdapter(api_key="k", timeout_seconds=12, base_url="http://x/v1")
        kwargs = mock_cls.call_args.kwargs
        assert kwargs["max_retries"] == 0
        assert kwargs["timeout"] == 12
        assert kwargs["base_url"] == "http://x/v1"

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(AnalysisNetworkError, match="network error"):
            _generate(mock_client)

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(AnalysisNetworkError, match="network error"):
            _generate(mock_client)

    def test_raises_network_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="quota exceeded",
            request=MagicMock(),
            body=None,
        )
        with pytest.raises(AnalysisNetworkError, match="API error"):
            _generate(mock_client)

    def test_raises_analysis_error_on_unexpected_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = ValueError("unexpected payload")
        with pytest.raises(AnalysisError, match="call failed"):
            _generate(mock_client)
