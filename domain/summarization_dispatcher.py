"""Routes long transcripts to the configured summarization backend."""

from config import SUMMARIZATION_PROVIDERS, Provider, ProviderConfig
from exceptions import UnsupportedProviderError
from infrastructure.interfaces.summarization_service import SummarizationService
from log_config import setup_logging

logger = setup_logging()

EMPTY_INPUT_RESPONSE = "No content received for summarization."


class SummarizationDispatcher:
    """Decides when to summarize and never lets a backend failure escape."""

    def __init__(self, config: ProviderConfig, service: SummarizationService):
        if config.summarization_backend not in SUMMARIZATION_PROVIDERS:
            raise UnsupportedProviderError(
                "AI", str(config.summarization_backend.value)
            )
        self._config = config
        self._service = service

    @property
    def backend(self) -> Provider:
        return self._config.summarization_backend

    def should_summarize(self, text: str) -> bool:
        """True when summaries are enabled and the text exceeds the threshold."""
        return self._config.summary_enabled and len(text) > self._config.summary_threshold

    async def summarize(self, text: str) -> str:
        """
        Summarizes a transcript with the configured backend.

        Blank input is answered without calling the backend.

        Args:
            text: The transcript text.

        Returns:
            The summary, or an empty string if the backend failed.
        """
        if not text.strip():
            logger.warning("No content to summarize")
            return EMPTY_INPUT_RESPONSE

        logger.info(
            "Generating summary and action steps...",
            extra={"backend": self.backend.value, "characters": len(text)},
        )
        try:
            summary = await self._service.summarize(text)
        except Exception:
            logger.exception(
                "Error during summary generation", extra={"backend": self.backend.value}
            )
            return ""

        logger.info(
            "Summary and action steps generated.",
            extra={"backend": self.backend.value, "characters": len(summary)},
        )
        return summary
