"""Dependency injection configuration for the voice-note transcriber service."""

from functools import lru_cache

import httpx
from anthropic import AsyncAnthropic
from dotenv import load_dotenv
from openai import AsyncOpenAI

from config import AppConfig, Provider, load_config
from domain import ReplyBuilder, SummarizationDispatcher, TranscriptionDispatcher
from exceptions import UnsupportedProviderError
from handlers import VoiceNoteHandler
from infrastructure import (
    AnthropicSummarizer,
    DeepgramTranscriber,
    LocalAudioStorage,
    OpenAISummarizer,
    OpenAITranscriber,
    WhatsAppClient,
)
from infrastructure.interfaces import SummarizationService, TranscriptionService
from log_config import setup_logging
from worker import Worker

logger = setup_logging()

_HTTP_TIMEOUT = httpx.Timeout(120.0, connect=10.0)


def build_transcription_service(
    config: AppConfig, http_client: httpx.AsyncClient
) -> TranscriptionService:
    """Creates the transcription backend selected by the configuration."""
    backend = config.providers.transcription_backend
    if backend == Provider.OPENAI:
        return OpenAITranscriber(
            AsyncOpenAI(api_key=config.openai.api_key), config.openai.whisper_model
        )
    if backend == Provider.DEEPGRAM:
        return DeepgramTranscriber(http_client, config.deepgram)
    raise UnsupportedProviderError("voice transcription", backend.value)


def build_summarization_service(config: AppConfig) -> SummarizationService:
    """Creates the summarization backend selected by the configuration."""
    backend = config.providers.summarization_backend
    if backend == Provider.OPENAI:
        return OpenAISummarizer(
            AsyncOpenAI(api_key=config.openai.api_key),
            config.openai.chat_model,
            config.summary,
        )
    if backend == Provider.ANTHROPIC:
        return AnthropicSummarizer(
            AsyncAnthropic(api_key=config.anthropic.api_key),
            config.anthropic.model,
            config.summary,
        )
    raise UnsupportedProviderError("AI", backend.value)


def build_handler(config: AppConfig, http_client: httpx.AsyncClient) -> VoiceNoteHandler:
    """Wires the voice-note handler and its collaborators."""
    transcription = TranscriptionDispatcher(
        config.providers.transcription_backend,
        build_transcription_service(config, http_client),
    )
    summarization = SummarizationDispatcher(
        config.providers, build_summarization_service(config)
    )
    logger.info(
        "Providers selected",
        extra={
            "transcription_backend": transcription.backend.value,
            "summarization_backend": summarization.backend.value,
            "summary_enabled": config.providers.summary_enabled,
            "summary_threshold": config.providers.summary_threshold,
        },
    )
    return VoiceNoteHandler(
        messaging=WhatsAppClient(http_client, config.whatsapp),
        storage=LocalAudioStorage(
            config.storage.audio_dir, config.storage.audio_extension
        ),
        transcription=transcription,
        summarization=summarization,
        reply_builder=ReplyBuilder(),
        notify_on_failure=config.notify_on_failure,
    )


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Returns the process-wide configuration, loaded once."""
    load_dotenv()
    return load_config()


@lru_cache(maxsize=1)
def get_http_client() -> httpx.AsyncClient:
    """Returns the shared HTTP client used for Deepgram and WhatsApp."""
    return httpx.AsyncClient(timeout=_HTTP_TIMEOUT)


@lru_cache(maxsize=1)
def get_worker() -> Worker:
    """Returns the configured worker."""
    return Worker(build_handler(get_config(), get_http_client()))
