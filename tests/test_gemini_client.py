from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest


def _response(*texts: str | None, candidates: bool = True, finish_reason=None):
    if not candidates:
        return SimpleNamespace(candidates=[], usage_metadata=None)
    parts = [SimpleNamespace(text=text) for text in texts]
    candidate = SimpleNamespace(
        content=SimpleNamespace(parts=parts),
        finish_reason=finish_reason,
        finish_message=None,
    )
    usage = SimpleNamespace(
        prompt_token_count=120, candidates_token_count=30, total_token_count=150
    )
    return SimpleNamespace(candidates=[candidate], usage_metadata=usage)


def test_generate_normalizes_first_candidate() -> None:
    from google.genai import types

    from interview_digest.infrastructure import GeminiModelClient

    sdk = MagicMock()
    sdk.models.generate_content.return_value = _response(
        "Speaker A: hi", "ignored", finish_reason=types.FinishReason.STOP
    )

    response = GeminiModelClient(sdk, "gemini-2.0-flash", 0.4).generate(
        ["prompt", "body"], operation="synthesis"
    )

    assert response.text == "Speaker A: hi"
    assert response.finish_reason == "STOP"
    assert response.part_count == 2
    assert response.usage.prompt_token_count == 120
    assert response.usage.candidates_token_count == 30
    assert response.usage.total_token_count == 150

    kwargs = sdk.models.generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-2.0-flash"
    assert kwargs["config"].temperature == 0.4
    assert [part.text for part in kwargs["contents"]] == ["prompt", "body"]


def test_generate_sends_audio_inline_with_media_type() -> None:
    from interview_digest.domain import AudioInput
    from interview_digest.infrastructure import GeminiModelClient

    sdk = MagicMock()
    sdk.models.generate_content.return_value = _response("transcript")
    audio = AudioInput(path="a.wav", data=b"RIFF", mime_type="audio/wav")

    GeminiModelClient(sdk, "gemini-2.0-flash").generate([audio, "prompt"], "transcription")

    audio_part, prompt_part = sdk.models.generate_content.call_args.kwargs["contents"]
    assert audio_part.inline_data.data == b"RIFF"
    assert audio_part.inline_data.mime_type == "audio/wav"
    assert prompt_part.text == "prompt"


@pytest.mark.parametrize(
    "response",
    [
        _response(candidates=False),
        _response(),
        SimpleNamespace(
            candidates=[SimpleNamespace(content=None, finish_reason=None, finish_message=None)],
            usage_metadata=None,
        ),
    ],
    ids=["no-candidates", "no-parts", "no-content"],
)
def test_generate_raises_on_empty_response(response) -> None:
    from interview_digest.exceptions import EmptyResponseError
    from interview_digest.infrastructure import GeminiModelClient

    sdk = MagicMock()
    sdk.models.generate_content.return_value = response

    with pytest.raises(EmptyResponseError, match="transcription"):
        GeminiModelClient(sdk, "m").generate(["p"], "transcription")


def test_generate_wraps_sdk_failure_without_retry() -> None:
    from interview_digest.exceptions import GenerationError
    from interview_digest.infrastructure import GeminiModelClient

    sdk = MagicMock()
    sdk.models.generate_content.side_effect = RuntimeError("503 unavailable")

    with pytest.raises(GenerationError) as exc_info:
        GeminiModelClient(sdk, "m").generate(["p"], "synthesis")

    assert sdk.models.generate_content.call_count == 1
    assert exc_info.value.operation == "synthesis"
    assert str(exc_info.value.cause) == "503 unavailable"


def test_none_part_text_is_treated_as_empty() -> None:
    from interview_digest.infrastructure import GeminiModelClient

    sdk = MagicMock()
    sdk.models.generate_content.return_value = _response(None)

    assert GeminiModelClient(sdk, "m").generate(["p"], "transcription").text == ""


def test_create_client_targets_vertex_with_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    from interview_digest.infrastructure import gemini_client

    captured: dict[str, object] = {}

    def fake_client(**kwargs):
        captured.update(kwargs)
        return "client"

    monkeypatch.setattr(gemini_client.genai, "Client", fake_client)

    assert gemini_client.create_client("proj", "europe-west9", 12.5) == "client"
    assert captured["vertexai"] is True
    assert captured["project"] == "proj"
    assert captured["location"] == "europe-west9"
    assert captured["http_options"].timeout == 12500


def test_create_client_without_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    from interview_digest.infrastructure import gemini_client

    captured: dict[str, object] = {}
    monkeypatch.setattr(gemini_client.genai, "Client", lambda **kwargs: captured.update(kwargs))

    gemini_client.create_client("proj", "us-central1", 0)

    assert captured["http_options"] is None


def test_build_model_client_reports_construction_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    from interview_digest import dependencies
    from interview_digest.config import GeminiConfig
    from interview_digest.exceptions import ModelClientError

    def broken(*_args, **_kwargs):
        raise ValueError("missing credentials")

    monkeypatch.setattr(dependencies, "create_client", broken)

    with pytest.raises(ModelClientError, match="unable to create client"):
        dependencies.build_model_client(GeminiConfig(project="p"))
