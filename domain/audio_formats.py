"""Mapping between declared audio MIME types and file extensions."""

from pathlib import Path

DEFAULT_EXTENSION = ".ogg"
DEFAULT_CONTENT_TYPE = "audio/ogg"

# Audio containers the WhatsApp Cloud API delivers for voice notes and forwarded files.
AUDIO_EXTENSIONS = {
    "audio/ogg": ".ogg",
    "audio/opus": ".opus",
    "audio/mp4": ".m4a",
    "audio/mpeg": ".mp3",
    "audio/aac": ".aac",
    "audio/amr": ".amr",
    "audio/wav": ".wav",
    "audio/webm": ".webm",
}

_CONTENT_TYPES = {extension: mime for mime, extension in AUDIO_EXTENSIONS.items()}


def extension_for(mime_type: str | None, default: str = DEFAULT_EXTENSION) -> str:
    """
    Returns the file extension for a declared MIME type.

    Parameters such as "; codecs=opus" are ignored. Unknown or missing
    types fall back to the default.
    """
    if not mime_type:
        return default
    essence = mime_type.split(";", 1)[0].strip().lower()
    return AUDIO_EXTENSIONS.get(essence, default)


def content_type_for(path: Path) -> str:
    """Returns the upload Content-Type for a stored audio file."""
    return _CONTENT_TYPES.get(path.suffix.lower(), DEFAULT_CONTENT_TYPE)
