"""Domain layer exports."""

from .models import InboundMessage, JobState, TranscriptionResult, VoiceNoteJob
from .reply_builder import ReplyBuilder
from .summarization_dispatcher import SummarizationDispatcher
from .transcription_dispatcher import TranscriptionDispatcher

__all__ = [
    "InboundMessage",
    "JobState",
    "TranscriptionResult",
    "VoiceNoteJob",
    "ReplyBuilder",
    "SummarizationDispatcher",
    "TranscriptionDispatcher",
]
