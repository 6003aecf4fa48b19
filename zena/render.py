"""Formatting of response chunks for the terminal."""

from __future__ import annotations

from collections.abc import Iterable

from zena.constants import COLOR_MAP, COLOR_RESET, COLOR_YELLOW
from zena.responses import AIResponse


def _render_one(number: int, response: AIResponse) -> str:
    code = COLOR_MAP.get(response.color.lower(), "")
    lines = []
    if response.type.lower() != "note":
        lines.append(f"{code}[{number}] [{response.type}]{COLOR_RESET}\n")
    lines.append(f"{code}{response.text}{COLOR_RESET}\n")
    if response.revert_command:
        lines.append(f"{COLOR_YELLOW}↩ Revert: {response.revert_command}{COLOR_RESET}\n")
    lines.append("\n")
    return "".join(lines)


def render_responses(responses: Iterable[AIResponse]) -> str:
    """Return the coloured text shown for ``responses``."""
    return "".join(_render_one(number, response) for number, response in enumerate(responses, 1))