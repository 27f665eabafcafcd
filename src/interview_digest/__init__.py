"""Transcribe interview recordings with Gemini and synthesize a summary."""

from .config import AppConfig, load_config
from .exceptions import InterviewDigestError
from .pipeline import InterviewPipeline

__all__ = ["AppConfig", "InterviewDigestError", "InterviewPipeline", "load_config"]
