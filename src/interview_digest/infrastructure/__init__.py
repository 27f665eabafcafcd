"""Infrastructure layer exports."""

from .gemini_client import GeminiModelClient, create_client
from .minio_storage import MinioStorageClient
from .stream_sink import StreamSink

__all__ = ["GeminiModelClient", "MinioStorageClient", "StreamSink", "create_client"]
