"""Routes voice notes to the configured transcription backend."""

from pathlib import Path

from config import TRANSCRIPTION_PROVIDERS, Provider
from exceptions import UnsupportedProviderError
from infrastructure.interfaces.transcription_service import TranscriptionService
from log_config import setup_logging

from .models import TranscriptionResult

logger = setup_logging()


class TranscriptionDispatcher:
    """Invokes the selected transcription backend and absorbs its failures."""

    def __init__(self, backend: Provider, service: TranscriptionService):
        if backend not in TRANSCRIPTION_PROVIDERS:
            raise UnsupportedProviderError("voice transcription", str(backend.value))
        self._backend = backend
        self._service = service

    @property
    def backend(self) -> Provider:
        return self._backend

    async def transcribe(self, audio_path: Path) -> TranscriptionResult | None:
        """
        Transcribes an audio file with the configured backend.

        Args:
            audio_path: Path to the locally stored voice note.

        Returns:
            The transcript, or None if the backend failed or produced no text.
        """
        logger.info(
            "Transcribing voice note...",
            extra={"backend": self._backend.value, "audio_file": audio_path.name},
        )
        try:
            result = await self._service.transcribe(audio_path)
        except Exception:
            logger.exception(
                "Transcription failed",
                extra={"backend": self._backend.value, "audio_file": audio_path.name},
            )
            return None

        if result is None or not result.text.strip():
            logger.warning(
                "Transcription returned no text",
                extra={"backend": self._backend.value, "audio_file": audio_path.name},
            )
            return None

        logger.info(
            "Voice note transcribed.",
            extra={"backend": self._backend.value, "characters": len(result.text)},
        )
        return result
