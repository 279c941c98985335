"""Handler layer exports."""

from .voice_note_handler import VoiceNoteHandler

__all__ = ["VoiceNoteHandler"]
