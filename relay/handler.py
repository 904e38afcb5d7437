"""Prompt relay: validate, forward to Gemini, translate the result."""

from __future__ import annotations

import json
import logging

from relay.client import GeminiClient
from relay.config import Settings
from relay.errors import (
    BadRequest,
    InternalError,
    MethodNotAllowed,
    RelayError,
    UpstreamError,
)
from relay.extract import extract_generated_text
from relay.models import NO_CONTENT, InboundRequest, RelayResponse, build_payload

logger = logging.getLogger(__name__)


def parse_prompt(body: str | None) -> str:
    """Return the non-empty ``prompt`` string from a JSON body or raise BadRequest."""
    if body is None:
        raise BadRequest("Missing request body")
    try:
        data = json.loads(body)
    except (TypeError, ValueError, RecursionError) as e:
        raise BadRequest(f"Malformed JSON body: {e}") from e

    prompt = data.get("prompt") if isinstance(data, dict) else None
    if not isinstance(prompt, str) or not prompt:
        raise BadRequest("Missing or empty prompt")
    return prompt


class PromptRelayHandler:
    """Handles one inbound request per ``handle`` call; holds no per-call state."""

    def __init__(self, settings: Settings, client: GeminiClient | None = None) -> None:
        self.settings = settings
        self.client = client or GeminiClient(settings)

    async def handle(self, request: InboundRequest) -> RelayResponse:
        try:
            return await self._relay(request)
        except UpstreamError as e:
            # Upstream detail was already logged by the client and stays server-side.
            return e.to_response()
        except RelayError as e:
            logger.info("Rejected request: %s", e)
            return e.to_response()
        except Exception:
            logger.exception("Internal Server Error")
            return InternalError().to_response()

    async def _relay(self, request: InboundRequest) -> RelayResponse:
        if request.http_method != "POST":
            raise MethodNotAllowed(request.http_method)

        prompt = parse_prompt(request.body)
        payload = build_payload(prompt)

        result = await self.client.generate_content(payload)

        text = extract_generated_text(result)
        if text is None:
            logger.warning("Gemini response had no candidate text; using fallback")
            text = NO_CONTENT

        return RelayResponse.json(200, {"text": text})
