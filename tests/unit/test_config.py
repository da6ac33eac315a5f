"""Unit tests for client configuration."""

import pytest
from pydantic import ValidationError

from laakhay.social.config import ClientData, HTTPConfig, TransportConfig


class TestClientData:
    """Test ClientData normalisation."""

    def test_adds_https_scheme(self):
        data = ClientData(base="social.example")
        assert data.base == "https://social.example"

    def test_keeps_explicit_scheme_and_strips_slash(self):
        data = ClientData(base="http://localhost:3000/")
        assert data.base == "http://localhost:3000"

    def test_empty_base_rejected(self):
        with pytest.raises(ValidationError):
            ClientData(base="")

    def test_frozen(self):
        data = ClientData(base="https://social.example", token="t")
        with pytest.raises(ValidationError):
            data.token = "other"


def test_config_defaults():
    """Dataclass configs have usable defaults."""
    assert HTTPConfig().timeout == 30.0
    assert HTTPConfig().user_agent.startswith("laakhay-social/")
    conf = TransportConfig()
    assert conf.ping_interval == 30.0
    assert conf.max_size is None
