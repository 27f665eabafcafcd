from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from interview_digest.domain.models import AudioInput, ModelResponse, UsageMetadata
from interview_digest.infrastructure.interfaces import ModelClient


class FakeModelClient(ModelClient):
    """Returns canned text per operation and records every call."""

    def __init__(
        self,
        transcripts: Sequence[str | Exception] = (),
        summary: str | Exception = "summary",
        on_call: Callable[[str], None] | None = None,
    ) -> None:
        self._transcripts = list(transcripts)
        self._summary = summary
        self._on_call = on_call
        self.calls: list[tuple[str, list]] = []

    def generate(self, contents, operation: str) -> ModelResponse:
        self.calls.append((operation, list(contents)))
        if self._on_call is not None:
            self._on_call(operation)
        outcome = self._transcripts.pop(0) if operation == "transcription" else self._summary
        if isinstance(outcome, Exception):
            raise outcome
        return ModelResponse(
            text=outcome,
            finish_reason="STOP",
            usage=UsageMetadata(
                prompt_token_count=10, candidates_token_count=5, total_token_count=15
            ),
        )

    def audio_inputs(self) -> list[AudioInput]:
        return [
            item
            for _, contents in self.calls
            for item in contents
            if isinstance(item, AudioInput)
        ]


@pytest.fixture
def write_audio(tmp_path: Path) -> Callable[..., Path]:
    def _write(name: str, data: bytes = b"fake-audio") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def gcp_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GCP_PROJECT", "test-project")
    for name in (
        "GCP_REGION",
        "GEMINI_MODEL",
        "GEMINI_TEMPERATURE",
        "GEMINI_TIMEOUT_SECONDS",
        "TRANSCRIPTION_PROMPT_PATH",
        "SUMMARY_PROMPT_PATH",
        "STORAGE_ENDPOINT",
        "STORAGE_ACCESS_KEY",
        "STORAGE_SECRET_KEY",
        "STORAGE_SECURE",
        "STORAGE_BUCKET",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def install_model(monkeypatch: pytest.MonkeyPatch) -> Callable[[FakeModelClient], FakeModelClient]:
    """Makes the composition root hand out the given fake instead of a Gemini client."""

    def _install(model: FakeModelClient) -> FakeModelClient:
        from interview_digest import dependencies

        monkeypatch.setattr(dependencies, "build_model_client", lambda config: model)
        return model

    return _install
