"""OpenAI implementation of the SummarizationService interface."""

from openai import AsyncOpenAI

from config import SummaryConfig
from exceptions import SummarizationError
from log_config import setup_logging

from .interfaces import SummarizationService

logger = setup_logging()


class OpenAISummarizer(SummarizationService):
    """Summarization service implementation using OpenAI chat completions."""

    def __init__(self, client: AsyncOpenAI, model_name: str, config: SummaryConfig):
        self._client = client
        self._model_name = model_name
        self._config = config

    async def summarize(self, text: str) -> str:
        """
        Summarizes a transcript with a single chat completion.

        Args:
            text: The transcript text.

        Returns:
            The trimmed completion content.

        Raises:
            SummarizationError: If the API call fails or returns no content.
        """
        try:
            completion = await self._client.chat.completions.create(
                model=self._model_name,
                messages=[
                    {"role": "system", "content": self._config.prompt},
                    {"role": "user", "content": text},
                ],
                max_tokens=self._config.max_tokens,
                n=1,
                temperature=self._config.temperature,
            )
        except Exception as e:
            logger.exception("OpenAI API call failed")
            raise SummarizationError(f"OpenAI summary failed: {e}", cause=e) from e

        content = None
        if completion.choices:
            message = completion.choices[0].message
            content = message.content if message is not None else None
        if content is None:
            raise SummarizationError("OpenAI API returned an undefined summary.")

        return content.strip()
