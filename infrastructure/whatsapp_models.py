"""WhatsApp Cloud API webhook payload models."""

from pydantic import BaseModel, ConfigDict, Field

from domain.models import InboundMessage


class _Media(BaseModel):
    id: str
    mime_type: str | None = None


class _Message(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    sender: str = Field(alias="from")
    type: str
    audio: _Media | None = None


class _Value(BaseModel):
    messages: list[_Message] = Field(default_factory=list)
    statuses: list[dict] = Field(default_factory=list)


class _Change(BaseModel):
    field: str | None = None
    value: _Value


class _Entry(BaseModel):
    id: str | None = None
    changes: list[_Change] = Field(default_factory=list)


class WebhookPayload(BaseModel):
    """Notification body posted by the Cloud API to the webhook."""

    object: str
    entry: list[_Entry] = Field(default_factory=list)

    def inbound_messages(self) -> list[InboundMessage]:
        """
        Flattens the notification into inbound chat messages.

        Status updates (sent, delivered, read) carry no message and are dropped.
        """
        messages = []
        for entry in self.entry:
            for change in entry.changes:
                for raw in change.value.messages:
                    messages.append(
                        InboundMessage(
                            message_id=raw.id,
                            sender_id=raw.sender,
                            message_type=raw.type,
                            media_id=raw.audio.id if raw.audio else None,
                            mime_type=raw.audio.mime_type if raw.audio else None,
                        )
                    )
        return messages
