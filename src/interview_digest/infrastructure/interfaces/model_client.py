"""Abstract interface for generative model operations."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from interview_digest.domain.models import AudioInput, ModelResponse


class ModelClient(ABC):
    """Abstract base class for generative model backends."""

    @abstractmethod
    def generate(
        self, contents: Sequence[str | AudioInput], operation: str
    ) -> ModelResponse:
        """
        Runs one blocking content generation call.

        Args:
            contents: Prompt text and attachments, in the order the model should see them.
            operation: Short label for the call, used in errors and logs.

        Returns:
            The first candidate's text with its finish reason and usage metadata.

        Raises:
            GenerationError: If the call fails.
            EmptyResponseError: If the model returns no candidates or no content parts.
        """
