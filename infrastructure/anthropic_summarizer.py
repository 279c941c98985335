"""Anthropic implementation of the SummarizationService interface."""

from anthropic import AsyncAnthropic

from config import SummaryConfig
from exceptions import SummarizationError
from log_config import setup_logging

from .interfaces import SummarizationService

logger = setup_logging()


class AnthropicSummarizer(SummarizationService):
    """Summarization service implementation using the Anthropic messages API."""

    def __init__(self, client: AsyncAnthropic, model_name: str, config: SummaryConfig):
        self._client = client
        self._model_name = model_name
        self._config = config

    async def summarize(self, text: str) -> str:
        """
        Summarizes a transcript with a single message exchange.

        Args:
            text: The transcript text.

        Returns:
            The text of the first content block.

        Raises:
            SummarizationError: If the API call fails or the model answers
                with a non-text block such as a tool call.
        """
        try:
            message = await self._client.messages.create(
                model=self._model_name,
                max_tokens=self._config.max_tokens,
                system=self._config.prompt,
                messages=[{"role": "user", "content": text}],
            )
        except Exception as e:
            logger.exception("Anthropic API call failed")
            raise SummarizationError(f"Anthropic summary failed: {e}", cause=e) from e

        if not message.content:
            raise SummarizationError("Anthropic model returned no content.")

        block = message.content[0]
        if block.type != "text":
            raise SummarizationError(
                "Anthropic model tried to use tool instead of returning a text response."
            )
        return block.text
