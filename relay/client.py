"""Async client for the Gemini generateContent REST endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from relay.config import Settings
from relay.errors import UpstreamError

logger = logging.getLogger(__name__)

# httpx logs the full request URL at INFO, and the URL carries the API key.
logging.getLogger("httpx").setLevel(logging.WARNING)


def _read_error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class GeminiClient:
    """Performs one outbound generateContent call per request."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self._transport = transport

    async def generate_content(self, payload: dict[str, Any]) -> dict[str, Any]:
        """POST the payload and return the decoded JSON result.

        Raises UpstreamError on a non-2xx status. Transport failures and
        undecodable success bodies propagate unchanged.
        """
        url = self.settings.generate_url
        logger.info("Calling Gemini model=%s url=%s", self.settings.model, url)

        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self.settings.timeout_s,
            follow_redirects=True,
        ) as http:
            resp = await http.post(
                url,
                params={"key": self.settings.api_key},
                headers={"Content-Type": "application/json"},
                json=payload,
            )

            if not resp.is_success:
                detail = _read_error_body(resp)
                logger.error("Gemini API Error: status=%d body=%s", resp.status_code, detail)
                raise UpstreamError(resp.status_code, detail)

            return resp.json()
