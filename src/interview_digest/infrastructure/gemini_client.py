"""Gemini implementation of the ModelClient interface."""

import logging
from collections.abc import Sequence

from google import genai
from google.genai import types

from interview_digest.domain.models import AudioInput, ModelResponse, UsageMetadata
from interview_digest.exceptions import EmptyResponseError, GenerationError

from .interfaces import ModelClient

logger = logging.getLogger(__name__)


class GeminiModelClient(ModelClient):
    """Runs content generation against Gemini through the google-genai SDK."""

    def __init__(
        self,
        client: genai.Client,
        model_name: str,
        temperature: float | None = None,
    ):
        self._client = client
        self._model_name = model_name
        self._temperature = temperature

    def generate(
        self, contents: Sequence[str | AudioInput], operation: str
    ) -> ModelResponse:
        """
        Sends one generate_content request and normalizes the first candidate.

        Audio inputs are sent inline as bytes tagged with their media type.
        """
        parts = [self._to_part(item) for item in contents]
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=parts,
                config=types.GenerateContentConfig(temperature=self._temperature),
            )
        except Exception as e:
            logger.exception(
                "Gemini API call failed",
                extra={"operation": operation, "model": self._model_name},
            )
            raise GenerationError(operation, e) from e

        candidates = response.candidates or []
        if not candidates:
            raise EmptyResponseError(operation)
        candidate = candidates[0]
        content_parts = candidate.content.parts if candidate.content else None
        if not content_parts:
            raise EmptyResponseError(operation)

        usage = response.usage_metadata
        return ModelResponse(
            text=content_parts[0].text or "",
            finish_reason=self._enum_name(candidate.finish_reason),
            finish_message=candidate.finish_message,
            usage=UsageMetadata(
                prompt_token_count=(usage.prompt_token_count or 0) if usage else 0,
                candidates_token_count=(usage.candidates_token_count or 0) if usage else 0,
                total_token_count=(usage.total_token_count or 0) if usage else 0,
            ),
            part_count=len(content_parts),
        )

    @staticmethod
    def _to_part(item: str | AudioInput) -> types.Part:
        if isinstance(item, AudioInput):
            return types.Part.from_bytes(data=item.data, mime_type=item.mime_type)
        return types.Part.from_text(text=item)

    @staticmethod
    def _enum_name(value) -> str | None:
        if value is None:
            return None
        return getattr(value, "name", str(value))


def create_client(project: str, location: str, timeout_seconds: float) -> genai.Client:
    """Builds a Vertex AI backed genai client with an explicit request timeout."""
    http_options = None
    if timeout_seconds > 0:
        # HttpOptions.timeout is in milliseconds.
        http_options = types.HttpOptions(timeout=int(timeout_seconds * 1000))
    return genai.Client(
        vertexai=True,
        project=project,
        location=location,
        http_options=http_options,
    )
