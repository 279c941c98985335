"""Custom exceptions for the voice-note transcriber service."""


class ConfigurationError(Exception):
    """Raised when the environment does not describe a runnable service."""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        self.missing_keys = missing_keys or []
        super().__init__(message)


class UnsupportedProviderError(ConfigurationError):
    """Raised when a backend identifier is unknown or not valid for a capability."""

    def __init__(self, capability: str, provider: str):
        self.capability = capability
        self.provider = provider
        super().__init__(f"Unsupported {capability} service: {provider}")


class TranscriptionError(Exception):
    """Raised when a transcription backend call fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{file_name}'")


class SummarizationError(Exception):
    """Raised when a summarization backend call fails or returns unusable content."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class MediaDownloadError(Exception):
    """Raised when downloading a voice note from the messaging API fails."""

    def __init__(self, media_id: str, cause: Exception | None = None):
        self.media_id = media_id
        self.cause = cause
        super().__init__(f"Failed to download media '{media_id}'")


class MessageSendError(Exception):
    """Raised when sending a reply through the messaging API fails."""

    def __init__(self, recipient_id: str, cause: Exception | None = None):
        self.recipient_id = recipient_id
        self.cause = cause
        super().__init__(f"Failed to send message to '{recipient_id}'")
