"""Infrastructure layer exports."""

from .anthropic_summarizer import AnthropicSummarizer
from .deepgram_transcriber import DeepgramTranscriber
from .local_storage import LocalAudioStorage
from .openai_summarizer import OpenAISummarizer
from .openai_transcriber import OpenAITranscriber
from .whatsapp_client import WhatsAppClient

__all__ = [
    "AnthropicSummarizer",
    "DeepgramTranscriber",
    "LocalAudioStorage",
    "OpenAISummarizer",
    "OpenAITranscriber",
    "WhatsAppClient",
]
