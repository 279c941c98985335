"""Filesystem implementation of the AudioStorage interface."""

import asyncio
import re
from collections.abc import AsyncIterable
from pathlib import Path

from domain.audio_formats import DEFAULT_EXTENSION, extension_for
from log_config import setup_logging

from .interfaces import AudioStorage

logger = setup_logging()

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class LocalAudioStorage(AudioStorage):
    """Keeps one audio file per message id in a scratch directory."""

    def __init__(self, audio_dir: Path, extension: str = DEFAULT_EXTENSION):
        self._audio_dir = audio_dir
        self._extension = extension

    def path_for(self, message_id: str, mime_type: str | None = None) -> Path:
        safe_id = _UNSAFE_CHARS.sub("_", message_id)
        return self._audio_dir / f"{safe_id}{extension_for(mime_type, self._extension)}"

    async def save(self, path: Path, chunks: AsyncIterable[bytes]) -> int:
        # File I/O stays off the event loop.
        await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
        size = 0
        audio_file = await asyncio.to_thread(path.open, "wb")
        try:
            async for chunk in chunks:
                await asyncio.to_thread(audio_file.write, chunk)
                size += len(chunk)
        finally:
            await asyncio.to_thread(audio_file.close)
        logger.info(
            "Audio saved", extra={"audio_file": path.name, "size_bytes": size}
        )
        return size

    def delete(self, path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
            logger.info("Audio deleted", extra={"audio_file": path.name})
        except OSError:
            logger.exception("Audio cleanup failed", extra={"audio_file": path.name})
