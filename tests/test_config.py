from pathlib import Path

import pytest
from pydantic import ValidationError

from config import DEFAULT_SUMMARY_PROMPT, Provider, load_config
from exceptions import ConfigurationError, UnsupportedProviderError
from tests.conftest import BASE_ENV, make_config


def test_defaults_match_documented_values() -> None:
    config = make_config()

    assert config.providers.transcription_backend == Provider.OPENAI
    assert config.providers.summarization_backend == Provider.OPENAI
    assert config.providers.summary_enabled is True
    assert config.providers.summary_threshold == 800
    assert config.openai.chat_model == "gpt-3.5-turbo"
    assert config.openai.whisper_model == "whisper-1"
    assert config.anthropic.model == "claude-3-haiku-20240307"
    assert config.deepgram.model == "nova-2"
    assert config.summary.max_tokens == 2000
    assert config.summary.temperature == 0.5
    assert config.whatsapp.app_secret is None
    assert config.notify_on_failure is False


def test_backend_names_are_case_insensitive() -> None:
    config = make_config(VOICE_TRANSCRIPTION_SERVICE="deepgram", DEEPGRAM_API_KEY="dg")
    assert config.providers.transcription_backend == Provider.DEEPGRAM


def test_unknown_backend_is_rejected() -> None:
    with pytest.raises(UnsupportedProviderError) as exc_info:
        make_config(AI_SERVICE="GEMINI")
    assert exc_info.value.provider == "GEMINI"


def test_backend_must_support_the_capability() -> None:
    with pytest.raises(UnsupportedProviderError):
        make_config(VOICE_TRANSCRIPTION_SERVICE="ANTHROPIC")
    with pytest.raises(UnsupportedProviderError):
        make_config(AI_SERVICE="DEEPGRAM")


def test_missing_keys_are_all_reported() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        load_config({"VOICE_TRANSCRIPTION_SERVICE": "DEEPGRAM", "AI_SERVICE": "ANTHROPIC"})
    assert exc_info.value.missing_keys == [
        "WHATSAPP_ACCESS_TOKEN",
        "WHATSAPP_PHONE_NUMBER_ID",
        "WHATSAPP_VERIFY_TOKEN",
        "ANTHROPIC_API_KEY",
        "DEEPGRAM_API_KEY",
    ]


def test_openai_key_only_required_when_openai_is_selected() -> None:
    env = {key: value for key, value in BASE_ENV.items() if key != "OPENAI_API_KEY"}
    env.update(
        VOICE_TRANSCRIPTION_SERVICE="DEEPGRAM",
        DEEPGRAM_API_KEY="dg",
        AI_SERVICE="ANTHROPIC",
        ANTHROPIC_API_KEY="ak",
    )
    config = load_config(env)
    assert config.openai.api_key == ""


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("TRUE", True), ("false", False), ("yes", False)],
)
def test_generate_summary_is_a_string_boolean(raw: str, expected: bool) -> None:
    assert make_config(GENERATE_SUMMARY=raw).providers.summary_enabled is expected


def test_non_integer_threshold_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        make_config(SUMMARY_THRESHOLD="lots")


def test_negative_threshold_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        make_config(SUMMARY_THRESHOLD="-1")


def test_optional_settings_are_read() -> None:
    config = make_config(
        AUDIO_DIR="/tmp/voice",
        WHATSAPP_APP_SECRET="shh",
        NOTIFY_ON_FAILURE="true",
        SUMMARY_PROMPT="Fasse die Nachricht zusammen.",
    )
    assert config.storage.audio_dir == Path("/tmp/voice")
    assert config.whatsapp.app_secret == "shh"
    assert config.notify_on_failure is True
    assert config.summary.prompt == "Fasse die Nachricht zusammen."


def test_config_is_frozen() -> None:
    config = make_config()
    with pytest.raises(ValidationError):
        config.providers.summary_threshold = 1  # type: ignore[misc]


def test_empty_values_fall_back_to_defaults() -> None:
    config = make_config(
        VOICE_TRANSCRIPTION_SERVICE="",
        AI_SERVICE="",
        SUMMARY_THRESHOLD="",
        GENERATE_SUMMARY="",
        OPENAI_MODEL="",
        WHISPER_MODEL="",
        SUMMARY_PROMPT="",
        WHATSAPP_API_VERSION="",
    )

    assert config.providers.transcription_backend == Provider.OPENAI
    assert config.providers.summarization_backend == Provider.OPENAI
    assert config.providers.summary_threshold == 800
    assert config.providers.summary_enabled is True
    assert config.openai.chat_model == "gpt-3.5-turbo"
    assert config.openai.whisper_model == "whisper-1"
    assert config.summary.prompt == DEFAULT_SUMMARY_PROMPT
    assert config.whatsapp.api_version == "v20.0"
