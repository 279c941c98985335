"""
Voice Note Transcriber Service.

FastAPI application receiving WhatsApp webhooks.
"""

from contextlib import asynccontextmanager

from ddtrace import patch_all
from fastapi import FastAPI

from dependencies import get_http_client, get_worker
from log_config import setup_logging
from routes import webhook_router

patch_all()

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Builds the worker at startup and drains in-flight jobs on shutdown."""
    worker = get_worker()
    logger.info("Worker initialized, accepting webhooks")
    yield
    await worker.drain()
    await get_http_client().aclose()


app = FastAPI(title="Voice Note Transcriber", lifespan=lifespan)
app.include_router(webhook_router)
