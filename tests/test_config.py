"""Tests for client configuration loading."""

import pytest

from tentacle.config import default_client_config, load_client_config
from tentacle.exceptions import ConfigurationError
from tentacle.http_session import create_client_timeout


def test_defaults_without_environment():
    assert load_client_config() == default_client_config()
    assert load_client_config() == {
        "timeout_seconds": 10,
        "max_connections": 10,
        "user_agent": None,
    }


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TENTACLE_TIMEOUT_SECONDS", "30")
    monkeypatch.setenv("TENTACLE_MAX_CONNECTIONS", "4")
    monkeypatch.setenv("TENTACLE_USER_AGENT", " my-app/1.0 ")

    config = load_client_config()

    assert config["timeout_seconds"] == 30
    assert config["max_connections"] == 4
    assert config["user_agent"] == "my-app/1.0"


def test_blank_values_use_defaults(monkeypatch):
    monkeypatch.setenv("TENTACLE_TIMEOUT_SECONDS", "  ")
    monkeypatch.setenv("TENTACLE_USER_AGENT", "")
    config = load_client_config()
    assert config["timeout_seconds"] == 10
    assert config["user_agent"] is None


@pytest.mark.parametrize("value", ["ten", "1.5", "0", "-3"])
def test_invalid_timeout(monkeypatch, value):
    monkeypatch.setenv("TENTACLE_TIMEOUT_SECONDS", value)
    with pytest.raises(ConfigurationError, match="TENTACLE_TIMEOUT_SECONDS"):
        load_client_config()


def test_client_timeout_scales_with_base(client_config):
    client_config["timeout_seconds"] = 5
    timeout = create_client_timeout(client_config)
    assert timeout.total == 15
    assert timeout.sock_read == 10
    assert timeout.sock_connect == 5
