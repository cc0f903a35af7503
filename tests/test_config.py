"""Config tests"""
from dataclasses import FrozenInstanceError

import pytest

from image_stylist.config import Config
from image_stylist.providers.provider import Provider

ENV_VARS = (
    "STYLIST_API_KEY",
    "OPENAI_API_KEY",
    "STYLIST_API_ENDPOINT",
    "STYLIST_MODEL",
    "STYLIST_PROVIDER",
    "STYLIST_TIMEOUT",
    "STYLIST_LANGUAGE",
    "STYLIST_STYLE_PROFILE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr("image_stylist.config.load_dotenv", lambda **_: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_config_from_env_success(monkeypatch):
    """Happy-path: only the API key is set, everything else defaults."""
    monkeypatch.setenv("STYLIST_API_KEY", "sk-abc")

    config = Config.from_env()

    assert config.api_key == "sk-abc"
    assert config.api_endpoint == "https://api.openai.com/v1/chat/completions"
    assert config.model == "gpt-4o"
    assert config.provider is Provider.CLOUD_CHAT
    assert config.timeout == 180.0
    assert config.language == "en"
    assert config.log_level == "INFO"
    assert config.style_profile is None


def test_config_falls_back_to_openai_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-openai")

    assert Config.from_env().api_key == "sk-openai"


def test_config_missing_key_fails_for_cloud():
    """Cloud provider without a key must raise."""
    with pytest.raises(ValueError, match="STYLIST_API_KEY"):
        Config.from_env()


def test_config_local_endpoint_needs_no_key(monkeypatch):
    monkeypatch.setenv("STYLIST_API_ENDPOINT", "http://ollama:11434/api/chat")
    monkeypatch.setenv("STYLIST_MODEL", "llava")

    config = Config.from_env()

    assert config.provider is Provider.LOCAL_MODEL
    assert config.api_key is None


def test_config_explicit_provider_wins_over_endpoint(monkeypatch):
    monkeypatch.setenv("STYLIST_API_ENDPOINT", "http://gpu-box:8080/api/chat")
    monkeypatch.setenv("STYLIST_PROVIDER", "LOCAL_MODEL")

    assert Config.from_env().provider is Provider.LOCAL_MODEL


def test_config_unknown_provider_fails(monkeypatch):
    monkeypatch.setenv("STYLIST_API_KEY", "sk-abc")
    monkeypatch.setenv("STYLIST_PROVIDER", "gemini")

    with pytest.raises(ValueError, match="STYLIST_PROVIDER"):
        Config.from_env()


def test_config_non_positive_timeout_fails(monkeypatch):
    monkeypatch.setenv("STYLIST_API_KEY", "sk-abc")
    monkeypatch.setenv("STYLIST_TIMEOUT", "0")

    with pytest.raises(ValueError, match="STYLIST_TIMEOUT"):
        Config.from_env()


def test_config_reads_language_and_profile(monkeypatch):
    monkeypatch.setenv("STYLIST_API_KEY", "sk-abc")
    monkeypatch.setenv("STYLIST_LANGUAGE", "pl")
    monkeypatch.setenv("STYLIST_STYLE_PROFILE", "Muted colors only.")
    monkeypatch.setenv("STYLIST_TIMEOUT", "45")

    config = Config.from_env()

    assert config.language == "pl"
    assert config.style_profile == "Muted colors only."
    assert config.timeout == 45.0


def test_config_immutable():
    """Frozen dataclass: attribute assignment must fail."""
    config = Config(
        api_key="sk",
        api_endpoint="https://api.openai.com/v1/chat/completions",
        model="gpt-4o",
        provider=Provider.CLOUD_CHAT,
        timeout=180.0,
        language="en",
        log_level="INFO",
    )

    with pytest.raises(FrozenInstanceError):
        config.model = "other"


@pytest.mark.parametrize("raw", ["soon", "3 minutes", "nan", "-5"])
def test_config_bad_timeout_names_the_variable(monkeypatch, raw):
    monkeypatch.setenv("STYLIST_API_KEY", "sk-abc")
    monkeypatch.setenv("STYLIST_TIMEOUT", raw)

    with pytest.raises(ValueError, match="STYLIST_TIMEOUT"):
        Config.from_env()
