"""Lookup, selection and validation of the configured AI provider."""

from __future__ import annotations

from pathlib import Path

from zena.config import PROVIDERS, load_config, save_config

_DISPLAY_NAMES = {"openai": "OpenAI", "anthropic": "Anthropic", "gemini": "Gemini"}


class ProviderError(ValueError):
    """A provider or its API key is missing, unknown or wrong."""


def get_ai_api_key(path: str | Path | None = None) -> tuple[str, str]:
    """Return ``(provider, key)`` of the default provider."""
    config = load_config(path)
    for name in PROVIDERS:
        settings = config.provider(name)
        if settings.default:
            return name, settings.key
    raise ProviderError("no default provider is set")


def mark_default(provider: str, path: str | Path | None = None) -> str:
    """Make ``provider`` the default and save; an empty name changes nothing."""
    if not provider:
        return ""
    config = load_config(path)
    if provider not in PROVIDERS:
        raise ProviderError(f"unsupported provider: {provider}")
    config.set_default(provider)
    save_config(config, path)
    return provider


def validate_key_provider(provider: str, key: str, path: str | Path | None = None) -> None:
    """Check that ``key`` is the key configured for ``provider``."""
    if not provider:
        raise ProviderError("provider cannot be empty")
    if not key:
        raise ProviderError("API key cannot be empty")
    config = load_config(path)
    if provider not in PROVIDERS:
        raise ProviderError(f"unsupported provider: {provider}")
    if config.provider(provider).key != key:
        raise ProviderError(f"invalid {_DISPLAY_NAMES[provider]} API key")