"""Runtime settings for the prompt relay, resolved once per process."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash-preview-05-20"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT_S = 120.0

API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY")


def resolve_api_key(explicit: str | None, *env_names: str) -> str:
    """Return the explicit key if given, else the first non-empty env var."""
    if explicit and explicit.strip():
        return explicit.strip()
    for name in env_names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_TIMEOUT_S
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Invalid GEMINI_TIMEOUT_S=%r - using %.0fs", raw, DEFAULT_TIMEOUT_S)
        return DEFAULT_TIMEOUT_S
    if timeout <= 0:
        logger.warning("Non-positive GEMINI_TIMEOUT_S=%r - using %.0fs", raw, DEFAULT_TIMEOUT_S)
        return DEFAULT_TIMEOUT_S
    return timeout


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    timeout_s: float = DEFAULT_TIMEOUT_S

    @property
    def generate_url(self) -> str:
        """Endpoint for the model's generateContent method, without the key."""
        return f"{self.api_base.rstrip('/')}/models/{self.model}:generateContent"


def load_settings(api_key: str | None = None, dotenv: bool = True) -> Settings:
    """Build settings from the environment (and a local .env file)."""
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    key = resolve_api_key(api_key, *API_KEY_ENV_VARS)
    if not key:
        logger.warning("Gemini API key not set; upstream calls will be rejected")

    return Settings(
        api_key=key,
        model=os.environ.get("GEMINI_MODEL", "").strip() or DEFAULT_MODEL,
        api_base=os.environ.get("GEMINI_API_BASE", "").strip() or DEFAULT_API_BASE,
        timeout_s=_parse_timeout(os.environ.get("GEMINI_TIMEOUT_S")),
    )
