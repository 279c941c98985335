"""Infrastructure interface exports."""

from .audio_storage import AudioStorage
from .messaging_client import MessagingClient
from .summarization_service import SummarizationService
from .transcription_service import TranscriptionService

__all__ = [
    "AudioStorage",
    "MessagingClient",
    "SummarizationService",
    "TranscriptionService",
]
