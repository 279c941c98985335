"""Deepgram implementation of the TranscriptionService interface."""

import asyncio
import json
from pathlib import Path

import httpx
from pydantic import BaseModel, Field, ValidationError

from config import DeepgramConfig
from domain.audio_formats import content_type_for
from domain.models import TranscriptionResult
from exceptions import TranscriptionError
from log_config import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class _Paragraphs(BaseModel):
    transcript: str = Field(min_length=1)


class _Alternative(BaseModel):
    paragraphs: _Paragraphs


class _Channel(BaseModel):
    alternatives: list[_Alternative] = Field(min_length=1)


class _Results(BaseModel):
    channels: list[_Channel] = Field(min_length=1)


class DeepgramResponse(BaseModel):
    """The subset of a prerecorded response the service relies on."""

    results: _Results

    @property
    def transcript(self) -> str:
        return self.results.channels[0].alternatives[0].paragraphs.transcript


def parse_transcript(payload: object) -> str | None:
    """
    Extracts the diarized paragraph transcript from a Deepgram response.

    Returns None when any part of
    results.channels[0].alternatives[0].paragraphs.transcript is missing.
    """
    try:
        return DeepgramResponse.model_validate(payload).transcript
    except ValidationError:
        return None


class DeepgramTranscriber(TranscriptionService):
    """Handles audio transcription using the Deepgram prerecorded API."""

    def __init__(self, client: httpx.AsyncClient, config: DeepgramConfig):
        self._client = client
        self._config = config

    def _query_params(self) -> dict[str, str]:
        return {
            "model": self._config.model,
            "language": self._config.language,
            "smart_format": "true",
            "diarize": "true",
            "punctuate": "true",
            "paragraphs": "true",
        }

    async def transcribe(self, audio_path: Path) -> TranscriptionResult | None:
        """
        Submits the audio buffer with diarization and paragraph segmentation.
        """
        audio = await asyncio.to_thread(audio_path.read_bytes)
        try:
            response = await self._client.post(
                self._config.base_url,
                params=self._query_params(),
                headers={
                    "Authorization": f"Token {self._config.api_key}",
                    "Content-Type": content_type_for(audio_path),
                },
                content=audio,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.exception(
                "Deepgram transcription failed", extra={"audio_file": audio_path.name}
            )
            raise TranscriptionError(audio_path.name, e) from e

        try:
            payload = response.json()
        except json.JSONDecodeError:
            logger.error(
                "Deepgram returned a non-JSON body",
                extra={"audio_file": audio_path.name},
            )
            return None

        transcript = parse_transcript(payload)
        if transcript is None:
            logger.error(
                "Necessary structure missing from Deepgram response",
                extra={"audio_file": audio_path.name},
            )
            return None

        logger.info(
            "Deepgram transcription successful", extra={"characters": len(transcript)}
        )
        return TranscriptionResult(text=transcript)
