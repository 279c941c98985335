"""Abstract interface for summarization service operations."""

from abc import ABC, abstractmethod


class SummarizationService(ABC):
    """Abstract base class for language-model summarization backends."""

    @abstractmethod
    async def summarize(self, text: str) -> str:
        """
        Summarizes a transcript.

        Args:
            text: The transcript text.

        Returns:
            The summary as plain prose.

        Raises:
            SummarizationError: If the call fails or the model answers
                with something other than text.
        """
        pass
