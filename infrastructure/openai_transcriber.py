"""OpenAI implementation of the TranscriptionService interface."""

import asyncio
from pathlib import Path
from typing import Any

from openai import AsyncOpenAI

from domain.models import TranscriptionResult
from exceptions import TranscriptionError
from log_config import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()

TRANSCRIPTION_PROMPT = (
    "The transcript should have natural paragraph breaks and bullet points for "
    "any action steps. The output should be easy to read and follow."
)


def _field(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


class OpenAITranscriber(TranscriptionService):
    """Handles audio transcription using the OpenAI audio API."""

    def __init__(self, client: AsyncOpenAI, model: str, prompt: str = TRANSCRIPTION_PROMPT):
        self._client = client
        self._model = model
        self._prompt = prompt

    async def transcribe(self, audio_path: Path) -> TranscriptionResult | None:
        """
        Uploads the audio bytes as multipart form data and reads the `text` field.
        """
        audio = await asyncio.to_thread(audio_path.read_bytes)
        try:
            response = await self._client.audio.transcriptions.create(
                file=(audio_path.name, audio),
                model=self._model,
                response_format="json",
                prompt=self._prompt,
            )
        except Exception as e:
            logger.exception(
                "OpenAI transcription failed", extra={"audio_file": audio_path.name}
            )
            raise TranscriptionError(audio_path.name, e) from e

        text = _field(response, "text")
        if not isinstance(text, str):
            logger.error(
                "OpenAI transcription response missing text",
                extra={"audio_file": audio_path.name},
            )
            return None

        logger.info(
            "OpenAI transcription successful", extra={"characters": len(text)}
        )
        return TranscriptionResult(text=text)
