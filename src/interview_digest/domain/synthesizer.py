"""Synthesis of a summary across all interview transcripts."""

import logging

from interview_digest.infrastructure.interfaces import ModelClient, OutputSink

from .models import format_synthesis_block
from .transcriber import log_response


class TranscriptSynthesizer:
    """Summarizes the combined transcripts into one markdown synthesis."""

    def __init__(
        self,
        model: ModelClient,
        prompt: str,
        logger: logging.Logger | None = None,
    ):
        self._model = model
        self._prompt = prompt
        self._logger = logger or logging.getLogger(__name__)

    def synthesize(self, combined_transcript: str, sink: OutputSink) -> str:
        """
        Generates the synthesis and writes it to the sink.

        Raises:
            GenerationError: If the model call fails.
            EmptyResponseError: If the model returns nothing.
            OutputWriteError: If the block cannot be written.
        """
        response = self._model.generate(
            [self._prompt, combined_transcript], operation="synthesis"
        )
        log_response(self._logger, response)

        sink.write(format_synthesis_block(response.text))
        return response.text
