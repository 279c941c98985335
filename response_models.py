"""Response models for the webhook API."""

from pydantic import BaseModel


class WebhookAck(BaseModel):
    """Acknowledgement returned to the messaging platform."""

    status: str = "accepted"
    scheduled: int
