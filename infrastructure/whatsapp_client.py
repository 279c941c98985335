"""WhatsApp Cloud API implementation of the MessagingClient interface."""

import hashlib
import hmac
from collections.abc import AsyncIterator

import httpx

from config import WhatsAppConfig
from domain.models import InboundMessage
from exceptions import MediaDownloadError, MessageSendError
from log_config import setup_logging

from .interfaces import MessagingClient

logger = setup_logging()

SIGNATURE_PREFIX = "sha256="


def verify_signature(app_secret: str, body: bytes, signature_header: str | None) -> bool:
    """Checks the X-Hub-Signature-256 header against the raw request body."""
    if not signature_header or not signature_header.startswith(SIGNATURE_PREFIX):
        return False
    expected = hmac.new(app_secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(expected, signature_header[len(SIGNATURE_PREFIX):])


class WhatsAppClient(MessagingClient):
    """Downloads voice notes and sends replies through the Graph API."""

    def __init__(self, client: httpx.AsyncClient, config: WhatsAppConfig):
        self._client = client
        self._config = config

    @property
    def _api_root(self) -> str:
        return f"{self._config.base_url.rstrip('/')}/{self._config.api_version}"

    @property
    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._config.access_token}"}

    async def _resolve_media_url(self, media_id: str) -> str:
        """Looks up the short-lived download URL for a media id."""
        response = await self._client.get(
            f"{self._api_root}/{media_id}", headers=self._headers
        )
        response.raise_for_status()
        url = response.json().get("url")
        if not url:
            raise MediaDownloadError(media_id, ValueError("media lookup returned no url"))
        return url

    async def stream_media(self, message: InboundMessage) -> AsyncIterator[bytes]:
        if not message.media_id:
            raise MediaDownloadError(message.message_id, ValueError("message has no media"))

        try:
            url = await self._resolve_media_url(message.media_id)
            async with self._client.stream("GET", url, headers=self._headers) as response:
                response.raise_for_status()
                async for chunk in response.aiter_bytes():
                    yield chunk
        except (httpx.HTTPError, ValueError) as e:
            logger.exception(
                "WhatsApp media download failed",
                extra={"message_id": message.message_id, "media_id": message.media_id},
            )
            raise MediaDownloadError(message.media_id, e) from e

    async def send_text(self, recipient_id: str, text: str) -> None:
        payload = {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": recipient_id,
            "type": "text",
            "text": {"preview_url": False, "body": text},
        }
        try:
            response = await self._client.post(
                f"{self._api_root}/{self._config.phone_number_id}/messages",
                json=payload,
                headers=self._headers,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.exception(
                "WhatsApp send failed", extra={"recipient_id": recipient_id}
            )
            raise MessageSendError(recipient_id, e) from e
        logger.info("Message sent", extra={"recipient_id": recipient_id})
