"""Application configuration loaded from environment variables."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ValidationError

from interview_digest.exceptions import ConfigurationError

PROMPTS_DIR = Path(__file__).parent / "prompts"

DEFAULT_MODEL_NAME = "gemini-2.0-flash"
DEFAULT_REGION = "europe-west9"
DEFAULT_TEMPERATURE = 0.4
DEFAULT_TIMEOUT_SECONDS = 300.0
DEFAULT_STORAGE_ENDPOINT = "storage.googleapis.com"


class GeminiConfig(BaseModel, frozen=True):
    """Gemini on Vertex AI configuration."""

    project: str
    region: str = DEFAULT_REGION
    model_name: str = DEFAULT_MODEL_NAME
    temperature: float = DEFAULT_TEMPERATURE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS  # 0 disables the client-side timeout
    transcription_prompt_path: Path = PROMPTS_DIR / "transcription.txt"
    summary_prompt_path: Path = PROMPTS_DIR / "summary.txt"


class StorageConfig(BaseModel, frozen=True):
    """S3-compatible object storage configuration (GCS interoperability by default)."""

    endpoint: str = DEFAULT_STORAGE_ENDPOINT
    access_key: str = ""
    secret_key: str = ""
    secure: bool = True
    bucket_name: str = ""


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    gemini: GeminiConfig
    storage: StorageConfig
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


# (name, required, default, description) for every variable load_config reads.
ENVIRONMENT_VARIABLES = [
    ("GCP_PROJECT", True, None, "Google Cloud project used for Vertex AI"),
    ("GCP_REGION", False, DEFAULT_REGION, "Vertex AI region"),
    ("GEMINI_MODEL", False, DEFAULT_MODEL_NAME, "Gemini model name"),
    ("GEMINI_TEMPERATURE", False, str(DEFAULT_TEMPERATURE), "Sampling temperature"),
    (
        "GEMINI_TIMEOUT_SECONDS",
        False,
        str(DEFAULT_TIMEOUT_SECONDS),
        "Per-request timeout, 0 to disable",
    ),
    ("TRANSCRIPTION_PROMPT_PATH", False, "<bundled>", "Transcription prompt file"),
    ("SUMMARY_PROMPT_PATH", False, "<bundled>", "Summary prompt file"),
    ("STORAGE_ENDPOINT", False, DEFAULT_STORAGE_ENDPOINT, "Object storage endpoint"),
    ("STORAGE_ACCESS_KEY", False, "", "Object storage access key"),
    ("STORAGE_SECRET_KEY", False, "", "Object storage secret key"),
    ("STORAGE_SECURE", False, "true", "Use HTTPS for object storage"),
    ("STORAGE_BUCKET", False, "", "Default object storage bucket"),
    ("LOG_LEVEL", False, "INFO", "Log level"),
]


def load_config() -> AppConfig:
    """
    Loads configuration from environment variables.

    Raises:
        ConfigurationError: If a required variable is missing or a value is invalid.
    """
    project = os.getenv("GCP_PROJECT", "").strip()
    if not project:
        raise ConfigurationError("GCP_PROJECT", "required key is missing value")

    try:
        return AppConfig(
            gemini=GeminiConfig(
                project=project,
                region=os.getenv("GCP_REGION", DEFAULT_REGION),
                model_name=os.getenv("GEMINI_MODEL", DEFAULT_MODEL_NAME),
                temperature=os.getenv("GEMINI_TEMPERATURE", str(DEFAULT_TEMPERATURE)),
                timeout_seconds=os.getenv(
                    "GEMINI_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)
                ),
                transcription_prompt_path=os.getenv(
                    "TRANSCRIPTION_PROMPT_PATH", str(PROMPTS_DIR / "transcription.txt")
                ),
                summary_prompt_path=os.getenv(
                    "SUMMARY_PROMPT_PATH", str(PROMPTS_DIR / "summary.txt")
                ),
            ),
            storage=StorageConfig(
                endpoint=os.getenv("STORAGE_ENDPOINT", DEFAULT_STORAGE_ENDPOINT),
                access_key=os.getenv("STORAGE_ACCESS_KEY", ""),
                secret_key=os.getenv("STORAGE_SECRET_KEY", ""),
                secure=os.getenv("STORAGE_SECURE", "true"),
                bucket_name=os.getenv("STORAGE_BUCKET", ""),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        )
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise ConfigurationError(field, error["msg"], cause=e) from e


def environment_usage() -> str:
    """Renders the environment variables this application reads."""
    lines = ["This application is configured via the environment:", ""]
    for name, required, default, description in ENVIRONMENT_VARIABLES:
        status = "required" if required else f"default {default!r}"
        lines.append(f"  {name:<28}{description} ({status})")
    return "\n".join(lines) + "\n"
