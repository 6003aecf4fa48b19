"""Structured answer chunks returned by the AI providers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_FIELDS = {
    "text": "text",
    "type": "type",
    "color": "color",
    "revertCommand": "revert_command",
}


@dataclass
class AIResponse:
    """One chunk of an answer: a Note, Warning, Error or Command."""

    text: str
    type: str
    color: str = ""
    revert_command: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the JSON form; empty optional fields are left out."""
        data = {"text": self.text}
        if self.color:
            data["color"] = self.color
        data["type"] = self.type
        if self.revert_command:
            data["revertCommand"] = self.revert_command
        return data


def _response_from_dict(item: Any) -> AIResponse:
    if not isinstance(item, dict):
        raise ValueError("each response must be a JSON object")
    values = {}
    for json_name, attr in _FIELDS.items():
        value = item.get(json_name)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ValueError(f"field '{json_name}' must be a string")
        values[attr] = value
    return AIResponse(**values)


def parse_responses(data: Any) -> list[AIResponse]:
    """Turn a decoded JSON array into response chunks."""
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("responses must be a JSON array")
    return [_response_from_dict(item) for item in data]