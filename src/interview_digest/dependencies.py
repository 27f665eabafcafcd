"""Dependency wiring for the interview digest pipeline."""

import logging
from pathlib import Path

from minio import Minio

from interview_digest.config import AppConfig, GeminiConfig, StorageConfig
from interview_digest.domain import InterviewTranscriber, TranscriptSynthesizer
from interview_digest.exceptions import ConfigurationError, ModelClientError
from interview_digest.infrastructure import (
    GeminiModelClient,
    MinioStorageClient,
    create_client,
)
from interview_digest.infrastructure.interfaces import ModelClient, StorageClient
from interview_digest.pipeline import InterviewPipeline


def read_prompt(path: Path, field: str) -> str:
    """Reads a prompt template from disk."""
    try:
        return Path(path).read_text(encoding="utf-8").strip()
    except OSError as e:
        raise ConfigurationError(field, f"cannot read prompt file {path}", cause=e) from e


def build_model_client(config: GeminiConfig) -> ModelClient:
    """
    Creates the Gemini client for the configured project and region.

    Raises:
        ModelClientError: If the SDK client cannot be constructed.
    """
    try:
        client = create_client(config.project, config.region, config.timeout_seconds)
    except Exception as e:
        raise ModelClientError(f"unable to create client: {e}", cause=e) from e
    return GeminiModelClient(client, config.model_name, config.temperature)


def build_pipeline(config: AppConfig, logger: logging.Logger) -> InterviewPipeline:
    """Composes the pipeline around the configured Gemini client."""
    transcription_prompt = read_prompt(
        config.gemini.transcription_prompt_path, "TRANSCRIPTION_PROMPT_PATH"
    )
    summary_prompt = read_prompt(config.gemini.summary_prompt_path, "SUMMARY_PROMPT_PATH")

    # Gemini
    model = build_model_client(config.gemini)

    # Service composition
    transcriber = InterviewTranscriber(model, transcription_prompt, logger)
    synthesizer = TranscriptSynthesizer(model, summary_prompt, logger)
    return InterviewPipeline(transcriber, synthesizer, logger)


def build_storage_client(config: StorageConfig) -> StorageClient:
    """Creates the object storage client."""
    minio_client = Minio(
        endpoint=config.endpoint,
        access_key=config.access_key or None,
        secret_key=config.secret_key or None,
        secure=config.secure,
    )
    return MinioStorageClient(minio_client)
