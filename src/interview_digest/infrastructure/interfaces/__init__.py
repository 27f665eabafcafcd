"""Infrastructure interface exports."""

from .model_client import ModelClient
from .output_sink import OutputSink
from .storage import StorageClient

__all__ = ["ModelClient", "OutputSink", "StorageClient"]
