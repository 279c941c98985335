from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from config import AppConfig, load_config
from domain import InboundMessage, TranscriptionResult
from exceptions import MediaDownloadError, MessageSendError
from infrastructure.interfaces import (
    MessagingClient,
    SummarizationService,
    TranscriptionService,
)

BASE_ENV = {
    "WHATSAPP_ACCESS_TOKEN": "wa-token",
    "WHATSAPP_PHONE_NUMBER_ID": "123456",
    "WHATSAPP_VERIFY_TOKEN": "verify-me",
    "OPENAI_API_KEY": "sk-test",
}


def run(coro):  # noqa: ANN001
    return asyncio.run(coro)


def make_config(**overrides: str) -> AppConfig:
    env = {**BASE_ENV, **overrides}
    return load_config(env)


def voice_note(message_id: str = "wamid.ABC123", sender_id: str = "4915112345678") -> InboundMessage:
    return InboundMessage(
        message_id=message_id,
        sender_id=sender_id,
        message_type="audio",
        media_id="media-1",
        mime_type="audio/ogg; codecs=opus",
    )


class FakeMessagingClient(MessagingClient):
    def __init__(
        self,
        chunks: list[bytes] | None = None,
        fail_download: bool = False,
        fail_send_at: int | None = None,
    ) -> None:
        self.chunks = chunks if chunks is not None else [b"OggS", b"\x00\x01"]
        self.fail_download = fail_download
        self.fail_send_at = fail_send_at
        self.sent: list[tuple[str, str]] = []
        self.send_attempts = 0
        self.downloads = 0

    async def stream_media(self, message: InboundMessage):
        self.downloads += 1
        for index, chunk in enumerate(self.chunks):
            if self.fail_download and index == 1:
                raise MediaDownloadError(message.media_id or "")
            yield chunk

    async def send_text(self, recipient_id: str, text: str) -> None:
        attempt = self.send_attempts
        self.send_attempts += 1
        if self.fail_send_at is not None and attempt == self.fail_send_at:
            raise MessageSendError(recipient_id)
        self.sent.append((recipient_id, text))


class FakeTranscriptionService(TranscriptionService):
    def __init__(self, result: TranscriptionResult | None = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[Path] = []
        self.saw_file_contents: list[bytes] = []

    async def transcribe(self, audio_path: Path) -> TranscriptionResult | None:
        self.calls.append(audio_path)
        if audio_path.exists():
            self.saw_file_contents.append(audio_path.read_bytes())
        if self.error is not None:
            raise self.error
        return self.result


class FakeSummarizationService(SummarizationService):
    def __init__(self, summary: str = "Short summary.", error: Exception | None = None) -> None:
        self.summary = summary
        self.error = error
        self.calls: list[str] = []

    async def summarize(self, text: str) -> str:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.summary


@pytest.fixture
def messaging() -> FakeMessagingClient:
    return FakeMessagingClient()
