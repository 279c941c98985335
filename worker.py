"""Worker that schedules voice-note jobs on the event loop."""

import asyncio
from collections.abc import Iterable

from domain import InboundMessage
from handlers import VoiceNoteHandler
from log_config import setup_logging

logger = setup_logging()


class Worker:
    """Runs one handler job per inbound message without blocking the webhook."""

    def __init__(self, handler: VoiceNoteHandler):
        self._handler = handler
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def submit(self, messages: Iterable[InboundMessage]) -> int:
        """
        Schedules processing for each message.

        Must be called from within a running event loop.

        Returns:
            Number of jobs scheduled.
        """
        scheduled = 0
        for message in messages:
            task = asyncio.create_task(self._on_message(message))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
            scheduled += 1
        return scheduled

    async def drain(self) -> None:
        """Waits for every in-flight job to finish."""
        if not self._tasks:
            return
        logger.info("Draining in-flight jobs", extra={"pending": len(self._tasks)})
        await asyncio.gather(*self._tasks, return_exceptions=True)

    async def _on_message(self, message: InboundMessage) -> None:
        """Runs the handler for one message."""
        logger.info(
            "Message received",
            extra={"message_id": message.message_id, "type": message.message_type},
        )
        try:
            state = await self._handler.handle(message)
        except Exception:
            logger.exception(
                "Message processing failed",
                extra={"message_id": message.message_id},
            )
            return

        if state is not None:
            logger.info(
                "Message processed",
                extra={"message_id": message.message_id, "state": state.value},
            )
