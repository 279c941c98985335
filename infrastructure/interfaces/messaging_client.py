"""Abstract interface for the chat messaging API."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from domain.models import InboundMessage


class MessagingClient(ABC):
    """Abstract base class for messaging backends."""

    @abstractmethod
    def stream_media(self, message: InboundMessage) -> AsyncIterator[bytes]:
        """
        Streams the media payload attached to a message.

        Args:
            message: The inbound message carrying a media reference.

        Returns:
            Async iterator over raw content chunks.

        Raises:
            MediaDownloadError: If the media cannot be resolved or fetched.
        """

    @abstractmethod
    async def send_text(self, recipient_id: str, text: str) -> None:
        """
        Sends a text reply.

        Args:
            recipient_id: The chat the reply goes to.
            text: The formatted message body.

        Raises:
            MessageSendError: If the send fails.
        """
