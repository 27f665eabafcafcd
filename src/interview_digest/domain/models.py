"""Domain models for the interview digest pipeline."""

import mimetypes
from pathlib import Path

from pydantic import BaseModel

TRANSCRIPT_SEPARATOR = "\n\n---\n\n"

FALLBACK_MIME_TYPE = "application/octet-stream"

# Platform MIME registries often miss these.
AUDIO_MIME_TYPES = {
    ".aac": "audio/aac",
    ".aiff": "audio/aiff",
    ".amr": "audio/amr",
    ".flac": "audio/flac",
    ".m4a": "audio/mp4",
    ".mp3": "audio/mpeg",
    ".mp4": "audio/mp4",
    ".ogg": "audio/ogg",
    ".opus": "audio/ogg",
    ".wav": "audio/wav",
    ".webm": "audio/webm",
}


def guess_mime_type(path: str) -> str | None:
    """Infers a media type from the file extension, or None when unknown."""
    suffix = Path(path).suffix.lower()
    if suffix in AUDIO_MIME_TYPES:
        return AUDIO_MIME_TYPES[suffix]
    mime_type, _ = mimetypes.guess_type(path)
    return mime_type


class AudioInput(BaseModel, frozen=True):
    """An audio file read into memory."""

    path: str
    data: bytes
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.data)


class UsageMetadata(BaseModel, frozen=True):
    """Token counts reported by the model for one call."""

    prompt_token_count: int = 0
    candidates_token_count: int = 0
    total_token_count: int = 0


class ModelResponse(BaseModel, frozen=True):
    """Normalized result of one content generation call."""

    text: str
    finish_reason: str | None = None
    finish_message: str | None = None
    usage: UsageMetadata = UsageMetadata()
    part_count: int = 1


class PipelineResult(BaseModel, frozen=True):
    """Everything a completed run produced."""

    transcripts: list[str]
    combined_transcript: str
    summary: str


def format_transcript_block(path: str, transcript: str) -> str:
    """Formats the output block for one transcribed file."""
    return f"Generated transcript for {path}:\n{transcript}\n\n"


def format_synthesis_block(summary: str) -> str:
    """Formats the output block for the final synthesis."""
    return f"\n\nSynthesis:\n{summary}\n"


def combine_transcripts(transcripts: list[str]) -> str:
    """Joins per-file transcripts in input order."""
    return TRANSCRIPT_SEPARATOR.join(transcripts)
