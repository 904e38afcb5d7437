"""Failure taxonomy for the relay and its caller-visible rendering."""

from __future__ import annotations

from typing import Any

from relay.models import (
    INTERNAL_ERROR,
    PROMPT_REQUIRED,
    UPSTREAM_FAILURE,
    RelayResponse,
)


class RelayError(Exception):
    """Base class; subclasses know the status and message the caller sees."""

    status_code: int = 500

    def to_response(self) -> RelayResponse:
        return RelayResponse.json(self.status_code, {"error": INTERNAL_ERROR})


class MethodNotAllowed(RelayError):
    status_code = 405

    def __init__(self, method: str) -> None:
        super().__init__(f"Method {method!r} not allowed")
        self.method = method

    def to_response(self) -> RelayResponse:
        return RelayResponse(self.status_code)


class BadRequest(RelayError):
    status_code = 400

    def to_response(self) -> RelayResponse:
        return RelayResponse.text(self.status_code, PROMPT_REQUIRED)


class UpstreamError(RelayError):
    """The upstream API answered with a non-success status.

    ``detail`` holds the upstream error body for server-side logs only.
    """

    def __init__(self, status_code: int, detail: Any = None) -> None:
        super().__init__(f"Upstream returned HTTP {status_code}")
        self.status_code = status_code
        self.detail = detail

    def to_response(self) -> RelayResponse:
        return RelayResponse.json(self.status_code, {"error": UPSTREAM_FAILURE})


class InternalError(RelayError):
    status_code = 500
