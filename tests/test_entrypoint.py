from pathlib import Path
import base64
import json
import sys

import httpx

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import api.index as index
from relay.client import GeminiClient
from relay.config import Settings
from relay.handler import PromptRelayHandler
from relay.models import InboundRequest


def _install_relay(monkeypatch, responder):
    settings = Settings(api_key="k")
    client = GeminiClient(settings, transport=httpx.MockTransport(responder))
    monkeypatch.setattr(index, "relay", PromptRelayHandler(settings, client=client))


def test_handler_returns_serverless_mapping(monkeypatch):
    reply = {"candidates": [{"content": {"parts": [{"text": "pong"}]}}]}
    _install_relay(monkeypatch, lambda request: httpx.Response(200, json=reply))

    result = index.handler({"httpMethod": "POST", "body": json.dumps({"prompt": "ping"})}, None)

    assert result["statusCode"] == 200
    assert result["headers"] == {"content-type": "application/json"}
    assert json.loads(result["body"]) == {"text": "pong"}


def test_handler_method_not_allowed_has_empty_body(monkeypatch):
    _install_relay(monkeypatch, lambda request: httpx.Response(500))
    result = index.handler({"httpMethod": "GET"}, None)
    assert result == {"statusCode": 405, "body": ""}


def test_handler_undecodable_base64_body_is_internal_error(monkeypatch):
    _install_relay(monkeypatch, lambda request: httpx.Response(500))
    result = index.handler({"httpMethod": "POST", "body": "/w==", "isBase64Encoded": True}, None)
    assert result["statusCode"] == 500
    assert json.loads(result["body"]) == {"error": "Internal Server Error"}


def test_from_event_reads_http_api_v2_and_base64():
    body = base64.b64encode(json.dumps({"prompt": "hé"}).encode("utf-8")).decode("ascii")
    event = {
        "requestContext": {"http": {"method": "POST"}},
        "body": body,
        "isBase64Encoded": True,
    }
    request = InboundRequest.from_event(event)
    assert request.http_method == "POST"
    assert json.loads(request.body) == {"prompt": "hé"}


def test_from_event_without_method_or_body():
    request = InboundRequest.from_event({})
    assert request.http_method == ""
    assert request.body is None
