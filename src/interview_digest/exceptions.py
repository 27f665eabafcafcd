"""Custom exceptions for the interview digest pipeline."""


class InterviewDigestError(Exception):
    """Base class for every failure that aborts a run."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class ConfigurationError(InterviewDigestError):
    """Raised when the environment does not yield a valid configuration."""

    def __init__(self, field: str, reason: str, cause: Exception | None = None):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration for '{field}': {reason}", cause)


class UsageError(InterviewDigestError):
    """Raised when the command line is incomplete."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class AudioReadError(InterviewDigestError):
    """Raised when an input audio file cannot be read."""

    def __init__(self, file_path: str, cause: Exception | None = None):
        self.file_path = file_path
        super().__init__(f"Failed to read audio file '{file_path}'", cause)


class OutputWriteError(InterviewDigestError):
    """Raised when writing or flushing the output sink fails."""

    def __init__(self, destination: str, cause: Exception | None = None):
        self.destination = destination
        super().__init__(f"Failed to write output to '{destination}'", cause)


class ModelClientError(InterviewDigestError):
    """Raised when the generative model client cannot be created."""


class GenerationError(InterviewDigestError):
    """Raised when a content generation call fails."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        super().__init__(f"Unable to generate contents for {operation}", cause)


class EmptyResponseError(InterviewDigestError):
    """Raised when the model returns no candidates or no content parts."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Empty response from model for {operation}")


class StorageUploadError(InterviewDigestError):
    """Raised when uploading a file to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        super().__init__(f"Failed to upload '{object_name}' to storage", cause)


class StorageLookupError(InterviewDigestError):
    """Raised when checking an object in storage fails for a reason other than absence."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        super().__init__(f"Failed to look up '{object_name}' in storage", cause)


class StorageDeleteError(InterviewDigestError):
    """Raised when deleting an object from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        super().__init__(f"Failed to delete '{object_name}' from storage", cause)
