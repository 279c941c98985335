"""Domain models for the voice-note transcriber."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel

AUDIO_MESSAGE_TYPE = "audio"


class InboundMessage(BaseModel, frozen=True):
    """A single inbound chat message, normalized from the messaging API."""

    message_id: str
    sender_id: str
    message_type: str
    media_id: str | None = None
    mime_type: str | None = None

    @property
    def is_voice_note(self) -> bool:
        """True when the declared content type is audio with downloadable media."""
        return self.message_type == AUDIO_MESSAGE_TYPE and bool(self.media_id)


class VoiceNoteJob(BaseModel, frozen=True):
    """Per-message processing context; lives until the reply is sent."""

    message_id: str
    sender_id: str
    audio_path: Path


class TranscriptionResult(BaseModel, frozen=True):
    """Normalized output of any transcription backend."""

    text: str


class JobState(str, Enum):
    """Steps a voice-note job moves through."""

    RECEIVED = "received"
    DOWNLOADING = "downloading"
    TRANSCRIBING = "transcribing"
    SUMMARIZING = "summarizing"
    FORMATTING = "formatting"
    SENDING = "sending"
    DONE = "done"
    FAILED = "failed"
