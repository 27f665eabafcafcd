"""Sequential transcription and synthesis of a batch of interviews."""

import logging
from collections.abc import Sequence

from interview_digest.domain import (
    InterviewTranscriber,
    PipelineResult,
    TranscriptSynthesizer,
    combine_transcripts,
)
from interview_digest.exceptions import InterviewDigestError, UsageError
from interview_digest.infrastructure.interfaces import OutputSink


class InterviewPipeline:
    """Transcribes every input in order, then writes one synthesis after them."""

    def __init__(
        self,
        transcriber: InterviewTranscriber,
        synthesizer: TranscriptSynthesizer,
        logger: logging.Logger | None = None,
    ):
        self._transcriber = transcriber
        self._synthesizer = synthesizer
        self._logger = logger or logging.getLogger(__name__)

    def run(self, audio_paths: Sequence[str], sink: OutputSink) -> PipelineResult:
        """
        Runs the whole batch against one sink.

        The sink is flushed after every transcript block and after the synthesis.
        The first failure propagates and no later file is attempted.

        Raises:
            UsageError: If no audio paths are given.
            InterviewDigestError: If any step fails.
        """
        if not audio_paths:
            raise UsageError("at least one audio file required as argument")

        total = len(audio_paths)
        self._logger.info("Transcribing audio files", extra={"count": total})

        transcripts: list[str] = []
        for index, audio_path in enumerate(audio_paths, start=1):
            self._logger.info(
                "Transcribing audio file",
                extra={"file": audio_path, "progress": f"{index}/{total}"},
            )
            try:
                transcripts.append(self._transcriber.transcribe(audio_path, sink))
                sink.flush()
            except InterviewDigestError as e:
                self._logger.error(
                    "Failed to transcribe audio file",
                    extra={"file": audio_path, "error": str(e)},
                )
                raise
            self._logger.info(
                "Audio file transcribed successfully", extra={"file": audio_path}
            )

        combined = combine_transcripts(transcripts)
        try:
            summary = self._synthesizer.synthesize(combined, sink)
            sink.flush()
        except InterviewDigestError as e:
            self._logger.error("Failed to do the post-processing", extra={"error": str(e)})
            raise
        self._logger.info("Post processing completed successfully")

        return PipelineResult(
            transcripts=transcripts,
            combined_transcript=combined,
            summary=summary,
        )
