import pytest

from zena.config import Config, ProviderConfig, default_config, load_config, save_config
from zena.helpers import (
    ProviderError,
    get_ai_api_key,
    mark_default,
    validate_key_provider,
)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    config = Config(
        openai=ProviderConfig(key="token", default=False),
        anthropic=ProviderConfig(key="", default=False),
        gemini=ProviderConfig(key="placeholder", default=True),
    )
    save_config(config, path)
    return path


def test_get_ai_api_key_returns_default(config_file):
    assert get_ai_api_key(config_file) == ("gemini", "placeholder")


def test_get_ai_api_key_prefers_openai_order(tmp_path):
    path = tmp_path / "config.json"
    config = Config(
        openai=ProviderConfig(key="token", default=True),
        gemini=ProviderConfig(key="placeholder", default=True),
    )
    save_config(config, path)
    assert get_ai_api_key(path) == ("openai", "token")


def test_get_ai_api_key_without_default(tmp_path):
    path = tmp_path / "config.json"
    save_config(Config(), path)
    with pytest.raises(ProviderError, match="no default provider is set"):
        get_ai_api_key(path)


def test_get_ai_api_key_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_ai_api_key(tmp_path / "absent.json")


def test_mark_default_saves_choice(config_file):
    assert mark_default("anthropic", config_file) == "anthropic"
    config = load_config(config_file)
    assert config.anthropic.default is True
    assert config.openai.default is False
    assert config.gemini.default is False
    assert config.gemini.key == "placeholder"


def test_mark_default_empty_does_nothing(tmp_path):
    path = tmp_path / "config.json"
    assert mark_default("", path) == ""
    assert not path.exists()


def test_mark_default_unknown_keeps_file(config_file):
    before = config_file.read_text(encoding="utf-8")
    with pytest.raises(ProviderError, match="unsupported provider: bogus"):
        mark_default("bogus", config_file)
    assert config_file.read_text(encoding="utf-8") == before


def test_validate_accepts_matching_key_and_rejects_other(config_file):
    assert validate_key_provider("gemini", "placeholder", config_file) is None
    with pytest.raises(ProviderError, match="invalid Gemini API key"):
        validate_key_provider("gemini", "token", config_file)


@pytest.mark.parametrize(
    "provider, message",
    [
        ("openai", "invalid OpenAI API key"),
        ("anthropic", "invalid Anthropic API key"),
        ("gemini", "invalid Gemini API key"),
    ],
)
def test_validate_wrong_key_messages(config_file, provider, message):
    with pytest.raises(ProviderError) as info:
        validate_key_provider(provider, "secret", config_file)
    assert str(info.value) == message


def test_validate_empty_provider(config_file):
    with pytest.raises(ProviderError, match="provider cannot be empty"):
        validate_key_provider("", "token", config_file)


def test_validate_empty_key(config_file):
    with pytest.raises(ProviderError, match="API key cannot be empty"):
        validate_key_provider("openai", "", config_file)


def test_validate_unsupported_provider(config_file):
    with pytest.raises(ProviderError, match="unsupported provider: mistral"):
        validate_key_provider("mistral", "token", config_file)


def test_validate_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        validate_key_provider("openai", "token", tmp_path / "absent.json")


def test_default_config_validates_empty_keys_as_invalid(tmp_path):
    path = tmp_path / "config.json"
    save_config(default_config(), path)
    provider, key = get_ai_api_key(path)
    assert (provider, key) == ("openai", "")
    with pytest.raises(ProviderError, match="API key cannot be empty"):
        validate_key_provider(provider, key, path)