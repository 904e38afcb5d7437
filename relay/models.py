"""Data models for a single relay invocation."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from typing import Any

PROMPT_REQUIRED = "Prompt is required."
UPSTREAM_FAILURE = "Failed to get a response from the AI model."
INTERNAL_ERROR = "Internal Server Error"
NO_CONTENT = "No content generated."

JSON_HEADERS = {"content-type": "application/json"}
TEXT_HEADERS = {"content-type": "text/plain; charset=utf-8"}


@dataclass
class InboundRequest:
    http_method: str
    body: str | None = None

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> InboundRequest:
        """Build a request from a Netlify / AWS Lambda proxy event."""
        method = event.get("httpMethod")
        if not method:
            http_ctx = (event.get("requestContext") or {}).get("http") or {}
            method = http_ctx.get("method", "")

        body = event.get("body")
        if body is not None and event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")

        return cls(http_method=method or "", body=body)


@dataclass
class RelayResponse:
    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def json(cls, status_code: int, payload: dict[str, Any]) -> RelayResponse:
        return cls(status_code, json.dumps(payload), dict(JSON_HEADERS))

    @classmethod
    def text(cls, status_code: int, message: str) -> RelayResponse:
        return cls(status_code, message, dict(TEXT_HEADERS))

    def to_dict(self) -> dict[str, Any]:
        """Render the mapping serverless runtimes expect back."""
        result: dict[str, Any] = {"statusCode": self.status_code, "body": self.body}
        if self.headers:
            result["headers"] = dict(self.headers)
        return result


def build_payload(prompt: str) -> dict[str, Any]:
    """Wrap the prompt in a single content block for generateContent."""
    return {"contents": [{"parts": [{"text": prompt}]}]}
