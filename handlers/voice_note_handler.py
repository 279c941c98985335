"""Handler for processing inbound voice notes."""

from domain import (
    InboundMessage,
    JobState,
    ReplyBuilder,
    SummarizationDispatcher,
    TranscriptionDispatcher,
    VoiceNoteJob,
)
from infrastructure.interfaces import AudioStorage, MessagingClient
from log_config import setup_logging

logger = setup_logging()

FAILURE_NOTICE = "Sorry, your voice note could not be transcribed."


class VoiceNoteHandler:
    """Orchestrates download, transcription, summary and replies for one voice note."""

    def __init__(
        self,
        messaging: MessagingClient,
        storage: AudioStorage,
        transcription: TranscriptionDispatcher,
        summarization: SummarizationDispatcher,
        reply_builder: ReplyBuilder,
        notify_on_failure: bool = False,
    ):
        self._messaging = messaging
        self._storage = storage
        self._transcription = transcription
        self._summarization = summarization
        self._replies = reply_builder
        self._notify_on_failure = notify_on_failure

    async def handle(self, message: InboundMessage) -> JobState | None:
        """
        Processes one inbound message.

        Non-audio messages are ignored. For voice notes the audio is
        downloaded, transcribed, optionally summarized and answered with
        up to two replies. The downloaded file is always deleted.

        Args:
            message: The normalized inbound message.

        Returns:
            DONE or FAILED for voice notes, None for ignored messages.
        """
        if not message.is_voice_note:
            logger.debug(
                "Ignoring non-audio message",
                extra={"message_id": message.message_id, "type": message.message_type},
            )
            return None

        job = VoiceNoteJob(
            message_id=message.message_id,
            sender_id=message.sender_id,
            audio_path=self._storage.path_for(message.message_id, message.mime_type),
        )
        state = JobState.RECEIVED
        logger.info(
            "Voice note received.",
            extra={"message_id": job.message_id, "sender_id": job.sender_id},
        )

        try:
            state = JobState.DOWNLOADING
            await self._storage.save(job.audio_path, self._messaging.stream_media(message))

            state = JobState.TRANSCRIBING
            transcription = await self._transcription.transcribe(job.audio_path)
            if transcription is None:
                logger.error(
                    "Error: Failed to process voice note.",
                    extra={"message_id": job.message_id},
                )
                await self._send_failure_notice(job)
                return JobState.FAILED

            if self._summarization.should_summarize(transcription.text):
                state = JobState.SUMMARIZING
                await self._send_summary(job, transcription.text)

            state = JobState.FORMATTING
            body = self._replies.transcript(transcription.text)

            state = JobState.SENDING
            await self._messaging.send_text(job.sender_id, body)
            logger.info(
                "Transcription sent back to the sender.",
                extra={"message_id": job.message_id},
            )
            return JobState.DONE

        except Exception:
            logger.exception(
                "Voice note processing failed",
                extra={"message_id": job.message_id, "state": state.value},
            )
            return JobState.FAILED

        finally:
            self._storage.delete(job.audio_path)

    async def _send_summary(self, job: VoiceNoteJob, text: str) -> None:
        """Sends the TL;DR reply; failures here never block the transcript."""
        summary = await self._summarization.summarize(text)
        if not summary:
            logger.warning("Summary skipped", extra={"message_id": job.message_id})
            return
        try:
            await self._messaging.send_text(job.sender_id, self._replies.summary(summary))
        except Exception:
            logger.exception("Summary send failed", extra={"message_id": job.message_id})
            return
        logger.info("Summary sent back to the sender.", extra={"message_id": job.message_id})

    async def _send_failure_notice(self, job: VoiceNoteJob) -> None:
        if not self._notify_on_failure:
            return
        await self._messaging.send_text(job.sender_id, FAILURE_NOTICE)
