"""Requests to the AI providers and decoding of their answers."""

from __future__ import annotations

import json
from typing import Any

import requests

from zena.constants import build_prompt
from zena.responses import AIResponse, parse_responses

OPENAI_URL = "https://api.openai.com/v1/chat/completions"
OPENAI_MODEL = "gpt-3.5-turbo"
GEMINI_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-2.0-flash:generateContent?key="
)
TIMEOUT = 30.0

_FENCE = "```"


class ProviderAPIError(Exception):
    """A provider refused the request or answered with something unusable."""


def _field(obj: Any, key: str, kind: type, source: str) -> Any:
    """Return ``obj[key]`` checked to be of ``kind``; missing values give ``kind()``."""
    if obj is None:
        return kind()
    if not isinstance(obj, dict):
        raise ProviderAPIError(f"unexpected response from {source}")
    value = obj.get(key)
    if value is None:
        return kind()
    if not isinstance(value, kind):
        raise ProviderAPIError(f"unexpected response from {source}: '{key}' has the wrong type")
    return value


def strip_code_fence(text: str) -> str:
    """Remove surrounding whitespace and a Markdown code fence, if there is one."""
    text = text.strip()
    if text.startswith(_FENCE):
        text = text.removeprefix(_FENCE + "json")
        text = text.removeprefix(_FENCE)
        text = text.removesuffix(_FENCE)
        text = text.strip()
    return text


def fetch_response_openai(query: str, api_key: str) -> list[AIResponse]:
    """Ask OpenAI and return its answer as a single blue Note."""
    payload = {
        "model": OPENAI_MODEL,
        "messages": [{"role": "user", "content": build_prompt(query)}],
    }
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    reply = requests.post(OPENAI_URL, data=json.dumps(payload), headers=headers, timeout=TIMEOUT)
    if reply.status_code != 200:
        raise ProviderAPIError("OpenAI API error: " + reply.text)

    data = reply.json()
    choices = _field(data, "choices", list, "OpenAI")
    if not choices:
        raise ProviderAPIError("no choices returned from OpenAI")
    message = _field(choices[0], "message", dict, "OpenAI")
    content = _field(message, "content", str, "OpenAI")
    return [AIResponse(text=content, type="Note", color="blue")]


def fetch_response_gemini(query: str, api_key: str) -> list[AIResponse]:
    """Ask Gemini and decode the JSON array of response chunks it returns."""
    payload = {
        "contents": [
            {"role": "user", "parts": [{"text": build_prompt(query)}]},
        ]
    }
    headers = {
        "Content-Type": "application/json",
        "X-Goog-Api-Key": api_key,
    }
    reply = requests.post(
        GEMINI_URL + api_key, data=json.dumps(payload), headers=headers, timeout=TIMEOUT
    )
    if reply.status_code != 200:
        raise ProviderAPIError("Gemini API error: " + reply.text)

    data = reply.json()
    candidates = _field(data, "candidates", list, "Gemini")
    parts = _field(_field(candidates[0], "content", dict, "Gemini"), "parts", list, "Gemini") if candidates else []
    if not candidates or not parts:
        raise ProviderAPIError("no response returned from Gemini")

    text = strip_code_fence(_field(parts[0], "text", str, "Gemini"))
    try:
        return parse_responses(json.loads(text))
    except ValueError as exc:
        raise ProviderAPIError(
            f"error parsing Gemini response JSON: {exc}\nRaw response: {text}"
        ) from exc


def fetch_response(query: str, provider: str, api_key: str) -> list[AIResponse]:
    """Send ``query`` to ``provider`` and return the response chunks."""
    if provider == "openai":
        return fetch_response_openai(query, api_key)
    if provider == "gemini":
        return fetch_response_gemini(query, api_key)
    raise ProviderAPIError("unsupported AI provider: " + provider)