"""WhatsApp webhook endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from config import AppConfig
from dependencies import get_config, get_worker
from infrastructure.whatsapp_client import verify_signature
from infrastructure.whatsapp_models import WebhookPayload
from log_config import setup_logging
from response_models import WebhookAck
from worker import Worker

logger = setup_logging()

router = APIRouter(prefix="/webhook", tags=["webhook"])

ConfigDep = Annotated[AppConfig, Depends(get_config)]
WorkerDep = Annotated[Worker, Depends(get_worker)]


@router.get("", response_class=PlainTextResponse)
def verify_subscription(
    config: ConfigDep,
    mode: Annotated[str, Query(alias="hub.mode")],
    token: Annotated[str, Query(alias="hub.verify_token")],
    challenge: Annotated[str, Query(alias="hub.challenge")],
) -> str:
    """Answers the subscription handshake sent when the webhook is registered."""
    if mode != "subscribe" or token != config.whatsapp.verify_token:
        logger.warning("Webhook verification rejected", extra={"mode": mode})
        raise HTTPException(status_code=403, detail="Verification failed")
    logger.info("Webhook verified")
    return challenge


@router.post("", response_model=WebhookAck)
async def receive_notification(
    request: Request, config: ConfigDep, worker: WorkerDep
) -> WebhookAck:
    """
    Accepts a notification and schedules a job per inbound message.

    Responds immediately; transcription happens in the background.
    """
    body = await request.body()

    if config.whatsapp.app_secret and not verify_signature(
        config.whatsapp.app_secret, body, request.headers.get("X-Hub-Signature-256")
    ):
        logger.warning("Webhook signature mismatch")
        raise HTTPException(status_code=403, detail="Invalid signature")

    try:
        payload = WebhookPayload.model_validate_json(body)
    except ValidationError as e:
        logger.exception("Invalid webhook payload", extra={"error": str(e)})
        raise HTTPException(status_code=400, detail="Invalid payload")

    scheduled = worker.submit(payload.inbound_messages())
    return WebhookAck(scheduled=scheduled)
