"""Provider configuration: API keys and the default provider, stored as JSON."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

PROVIDERS = ("openai", "anthropic", "gemini")


@dataclass
class ProviderConfig:
    """API key of one provider and whether it is the default one."""

    key: str = ""
    default: bool = False


@dataclass
class Config:
    """Settings for every supported AI provider."""

    openai: ProviderConfig = field(default_factory=ProviderConfig)
    anthropic: ProviderConfig = field(default_factory=ProviderConfig)
    gemini: ProviderConfig = field(default_factory=ProviderConfig)

    def provider(self, name: str) -> ProviderConfig:
        """Return the settings of the provider called ``name``."""
        if name not in PROVIDERS:
            raise ValueError(f"unsupported provider: {name}")
        return getattr(self, name)

    def set_default(self, name: str) -> None:
        """Make ``name`` the only default provider."""
        chosen = self.provider(name)
        for other in PROVIDERS:
            getattr(self, other).default = False
        chosen.default = True

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Return the configuration in its JSON form."""
        return {
            name: {"key": getattr(self, name).key, "default": getattr(self, name).default}
            for name in PROVIDERS
        }


def _provider_from_dict(name: str, data: Any) -> ProviderConfig:
    if data is None:
        return ProviderConfig()
    if not isinstance(data, dict):
        raise ValueError(f"provider '{name}' must be an object")
    key = data.get("key")
    default = data.get("default")
    if key is None:
        key = ""
    if default is None:
        default = False
    if not isinstance(key, str):
        raise ValueError(f"provider '{name}': key must be a string")
    if not isinstance(default, bool):
        raise ValueError(f"provider '{name}': default must be a boolean")
    return ProviderConfig(key=key, default=default)


def config_from_dict(data: Any) -> Config:
    """Build a Config from decoded JSON; unknown fields are ignored."""
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ValueError("configuration must be a JSON object")
    return Config(**{f.name: _provider_from_dict(f.name, data.get(f.name)) for f in fields(Config)})


def default_config() -> Config:
    """Return the configuration written on first start: OpenAI is the default."""
    config = Config()
    config.openai.default = True
    return config


def config_path() -> Path:
    """Return the platform's location of the configuration file."""
    home = Path.home()
    if sys.platform == "win32":
        return home / "AppData" / "Local" / "zena" / "config.json"
    return home / ".config" / "zena" / "config.json"


def load_config(path: str | Path | None = None) -> Config:
    """Read the configuration; raises FileNotFoundError if it does not exist."""
    target = Path(path) if path is not None else config_path()
    with target.open(encoding="utf-8") as handle:
        data = json.load(handle)
    return config_from_dict(data)


def save_config(config: Config, path: str | Path | None = None) -> None:
    """Write the configuration, creating its directory when needed."""
    target = Path(path) if path is not None else config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        json.dump(config.to_dict(), handle, indent=2, ensure_ascii=False)
        handle.write("\n")