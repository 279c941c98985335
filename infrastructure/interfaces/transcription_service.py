"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from domain.models import TranscriptionResult


class TranscriptionService(ABC):
    """Abstract base class for audio transcription backends."""

    @abstractmethod
    async def transcribe(self, audio_path: Path) -> TranscriptionResult | None:
        """
        Transcribes a local audio file.

        Args:
            audio_path: Path to the downloaded voice note.

        Returns:
            The normalized transcript, or None if the provider answered
            with a response that does not contain one.

        Raises:
            TranscriptionError: If the provider call fails.
        """
        pass
