"""Domain layer exports."""

from .models import (
    TRANSCRIPT_SEPARATOR,
    AudioInput,
    ModelResponse,
    PipelineResult,
    UsageMetadata,
    combine_transcripts,
)
from .synthesizer import TranscriptSynthesizer
from .transcriber import InterviewTranscriber

__all__ = [
    "TRANSCRIPT_SEPARATOR",
    "AudioInput",
    "ModelResponse",
    "PipelineResult",
    "UsageMetadata",
    "combine_transcripts",
    "InterviewTranscriber",
    "TranscriptSynthesizer",
]
