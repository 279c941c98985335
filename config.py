"""Application configuration loaded from environment variables."""

import os
import tempfile
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from exceptions import ConfigurationError, UnsupportedProviderError

DEFAULT_SUMMARY_PROMPT = "Summarize the message in at most 1-2 sentences."


class Provider(str, Enum):
    """Hosted backends the service knows how to call."""

    OPENAI = "OPENAI"
    ANTHROPIC = "ANTHROPIC"
    DEEPGRAM = "DEEPGRAM"


TRANSCRIPTION_PROVIDERS = frozenset({Provider.OPENAI, Provider.DEEPGRAM})
SUMMARIZATION_PROVIDERS = frozenset({Provider.OPENAI, Provider.ANTHROPIC})


class ProviderConfig(BaseModel, frozen=True):
    """Backend selection and summary policy, fixed for the process lifetime."""

    transcription_backend: Provider = Provider.OPENAI
    summarization_backend: Provider = Provider.OPENAI
    summary_enabled: bool = True
    summary_threshold: int = Field(default=800, ge=0)


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI API configuration."""

    api_key: str = ""
    chat_model: str = "gpt-3.5-turbo"
    whisper_model: str = "whisper-1"


class AnthropicConfig(BaseModel, frozen=True):
    """Anthropic API configuration."""

    api_key: str = ""
    model: str = "claude-3-haiku-20240307"


class DeepgramConfig(BaseModel, frozen=True):
    """Deepgram prerecorded transcription configuration."""

    api_key: str = ""
    model: str = "nova-2"
    language: str = "en"
    base_url: str = "https://api.deepgram.com/v1/listen"


class SummaryConfig(BaseModel, frozen=True):
    """Language-model sampling settings for summaries."""

    prompt: str = DEFAULT_SUMMARY_PROMPT
    max_tokens: int = 2000
    temperature: float = 0.5


class WhatsAppConfig(BaseModel, frozen=True):
    """WhatsApp Cloud API configuration."""

    access_token: str
    phone_number_id: str
    verify_token: str
    app_secret: str | None = None
    api_version: str = "v20.0"
    base_url: str = "https://graph.facebook.com"


class StorageConfig(BaseModel, frozen=True):
    """Local scratch storage for downloaded voice notes."""

    audio_dir: Path = Path(tempfile.gettempdir())
    audio_extension: str = ".ogg"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    providers: ProviderConfig
    openai: OpenAIConfig
    anthropic: AnthropicConfig
    deepgram: DeepgramConfig
    summary: SummaryConfig
    whatsapp: WhatsAppConfig
    storage: StorageConfig
    notify_on_failure: bool = False


def _parse_bool(value: str) -> bool:
    return value.strip().lower() == "true"


def _parse_provider(
    value: str, capability: str, supported: frozenset[Provider]
) -> Provider:
    """Maps an environment value onto a provider valid for the capability."""
    try:
        provider = Provider(value.strip().upper())
    except ValueError as e:
        raise UnsupportedProviderError(capability, value) from e
    if provider not in supported:
        raise UnsupportedProviderError(capability, provider.value)
    return provider


def required_keys(transcription: Provider, summarization: Provider) -> list[str]:
    """Lists the environment keys the selected backends cannot run without."""
    keys = ["WHATSAPP_ACCESS_TOKEN", "WHATSAPP_PHONE_NUMBER_ID", "WHATSAPP_VERIFY_TOKEN"]
    if Provider.OPENAI in (transcription, summarization):
        keys.append("OPENAI_API_KEY")
    if summarization == Provider.ANTHROPIC:
        keys.append("ANTHROPIC_API_KEY")
    if transcription == Provider.DEEPGRAM:
        keys.append("DEEPGRAM_API_KEY")
    return keys


def load_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """
    Loads configuration from environment variables.

    Args:
        environ: Mapping to read instead of os.environ.

    Returns:
        The frozen application configuration.

    Raises:
        UnsupportedProviderError: If a backend identifier is not recognized.
        ConfigurationError: If required keys are missing or values are malformed.
    """
    env = os.environ if environ is None else environ

    transcription_backend = _parse_provider(
        env.get("VOICE_TRANSCRIPTION_SERVICE") or "OPENAI",
        "voice transcription",
        TRANSCRIPTION_PROVIDERS,
    )
    summarization_backend = _parse_provider(
        env.get("AI_SERVICE") or "OPENAI", "AI", SUMMARIZATION_PROVIDERS
    )

    missing = [
        key
        for key in required_keys(transcription_backend, summarization_backend)
        if not env.get(key)
    ]
    if missing:
        raise ConfigurationError(
            "Missing required environment variables: " + ", ".join(missing),
            missing_keys=missing,
        )

    try:
        summary_threshold = int(env.get("SUMMARY_THRESHOLD") or "800")
    except ValueError as e:
        raise ConfigurationError(
            f"SUMMARY_THRESHOLD must be an integer, got {env['SUMMARY_THRESHOLD']!r}"
        ) from e

    try:
        return AppConfig(
            providers=ProviderConfig(
                transcription_backend=transcription_backend,
                summarization_backend=summarization_backend,
                summary_enabled=_parse_bool(env.get("GENERATE_SUMMARY") or "true"),
                summary_threshold=summary_threshold,
            ),
            openai=OpenAIConfig(
                api_key=env.get("OPENAI_API_KEY", ""),
                chat_model=env.get("OPENAI_MODEL") or "gpt-3.5-turbo",
                whisper_model=env.get("WHISPER_MODEL") or "whisper-1",
            ),
            anthropic=AnthropicConfig(
                api_key=env.get("ANTHROPIC_API_KEY", ""),
                model=env.get("ANTHROPIC_MODEL") or "claude-3-haiku-20240307",
            ),
            deepgram=DeepgramConfig(
                api_key=env.get("DEEPGRAM_API_KEY", ""),
                model=env.get("DEEPGRAM_MODEL") or "nova-2",
                language=env.get("DEEPGRAM_LANGUAGE") or "en",
            ),
            summary=SummaryConfig(
                prompt=env.get("SUMMARY_PROMPT") or DEFAULT_SUMMARY_PROMPT,
            ),
            whatsapp=WhatsAppConfig(
                access_token=env["WHATSAPP_ACCESS_TOKEN"],
                phone_number_id=env["WHATSAPP_PHONE_NUMBER_ID"],
                verify_token=env["WHATSAPP_VERIFY_TOKEN"],
                app_secret=env.get("WHATSAPP_APP_SECRET") or None,
                api_version=env.get("WHATSAPP_API_VERSION") or "v20.0",
            ),
            storage=StorageConfig(
                audio_dir=Path(env.get("AUDIO_DIR") or tempfile.gettempdir()),
            ),
            notify_on_failure=_parse_bool(env.get("NOTIFY_ON_FAILURE") or "false"),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
