"""Transcription of individual interview recordings."""

import logging

from interview_digest.exceptions import AudioReadError
from interview_digest.infrastructure.interfaces import ModelClient, OutputSink

from .models import (
    FALLBACK_MIME_TYPE,
    AudioInput,
    ModelResponse,
    format_transcript_block,
    guess_mime_type,
)


class InterviewTranscriber:
    """Turns one audio file into a transcript and writes it to the sink."""

    def __init__(
        self,
        model: ModelClient,
        prompt: str,
        logger: logging.Logger | None = None,
    ):
        self._model = model
        self._prompt = prompt
        self._logger = logger or logging.getLogger(__name__)

    def transcribe(self, audio_path: str, sink: OutputSink) -> str:
        """
        Transcribes an audio file and writes the formatted block to the sink.

        Args:
            audio_path: Path of the local audio file.
            sink: Destination for the transcript block. Flushing is left to the caller.

        Returns:
            The transcript text, possibly empty.

        Raises:
            AudioReadError: If the file cannot be read. Nothing is written in that case.
            GenerationError: If the model call fails.
            EmptyResponseError: If the model returns nothing.
            OutputWriteError: If the block cannot be written.
        """
        audio = self._read_audio(audio_path)
        self._logger.info(
            "Audio info",
            extra={"mimetype": audio.mime_type, "size": audio.size, "file": audio.path},
        )

        response = self._model.generate([audio, self._prompt], operation="transcription")
        log_response(self._logger, response, file=audio_path)
        self._logger.info(
            "Response parts", extra={"num_parts": response.part_count, "file": audio_path}
        )

        transcript = response.text
        self._logger.info(
            "Transcript length", extra={"length": len(transcript), "file": audio_path}
        )
        if not transcript:
            self._logger.warning(
                "Received empty transcript from model", extra={"file": audio_path}
            )

        sink.write(format_transcript_block(audio_path, transcript))
        return transcript

    def _read_audio(self, audio_path: str) -> AudioInput:
        try:
            with open(audio_path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise AudioReadError(audio_path, e) from e

        mime_type = guess_mime_type(audio_path)
        if mime_type is None:
            self._logger.warning(
                "Unknown audio media type, sending as binary",
                extra={"file": audio_path, "mimetype": FALLBACK_MIME_TYPE},
            )
            mime_type = FALLBACK_MIME_TYPE
        return AudioInput(path=audio_path, data=data, mime_type=mime_type)


def log_response(logger: logging.Logger, response: ModelResponse, **context) -> None:
    """Logs usage metadata and finish reason of a model response."""
    logger.info(
        "Usage metadata",
        extra={
            "prompt_tokens": response.usage.prompt_token_count,
            "candidates_tokens": response.usage.candidates_token_count,
            "total_tokens": response.usage.total_token_count,
            **context,
        },
    )
    logger.info(
        "Finish",
        extra={
            "finish_reason": response.finish_reason,
            "finish_message": response.finish_message,
            **context,
        },
    )
