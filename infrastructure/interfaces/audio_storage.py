"""Abstract interface for local voice-note storage."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterable
from pathlib import Path


class AudioStorage(ABC):
    """Abstract base class for the scratch store holding downloaded audio."""

    @abstractmethod
    def path_for(self, message_id: str, mime_type: str | None = None) -> Path:
        """Returns the file path reserved for a message's audio in its declared format."""

    @abstractmethod
    async def save(self, path: Path, chunks: AsyncIterable[bytes]) -> int:
        """
        Writes streamed audio to disk.

        Args:
            path: Destination returned by path_for.
            chunks: Audio content chunks.

        Returns:
            Number of bytes written.
        """

    @abstractmethod
    def delete(self, path: Path) -> None:
        """Removes the audio file. Never raises."""
