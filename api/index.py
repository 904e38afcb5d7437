"""Serverless entrypoint for the Gemini prompt relay.

Deployed as a Netlify / AWS Lambda style function: the runtime passes a proxy
event and expects a ``{"statusCode", "headers", "body"}`` mapping back.
Settings are resolved once per cold start and shared by every invocation.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any

from relay.config import load_settings
from relay.errors import InternalError
from relay.handler import PromptRelayHandler
from relay.models import InboundRequest

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

settings = load_settings()
relay = PromptRelayHandler(settings)


async def async_handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Async-capable runtimes can await this directly."""
    try:
        request = InboundRequest.from_event(event)
    except Exception:
        logger.exception("Internal Server Error")
        return InternalError().to_response().to_dict()

    response = await relay.handle(request)
    return response.to_dict()


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Serverless function handler."""
    return asyncio.run(async_handler(event, context))
