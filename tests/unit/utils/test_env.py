"""Tests for the environment variable helpers."""

import pytest

from mcp_compass.utils.env import (
    get_custom_headers,
    get_float_from_env,
    is_env_ssl_verify,
    is_env_truthy,
)


class TestIsEnvTruthy:
    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes", "y", "on", " on "])
    def test_truthy(self, monkeypatch, value):
        monkeypatch.setenv("TEST_FLAG", value)
        assert is_env_truthy("TEST_FLAG") is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "", "maybe"])
    def test_falsy(self, monkeypatch, value):
        monkeypatch.setenv("TEST_FLAG", value)
        assert is_env_truthy("TEST_FLAG") is False

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("TEST_FLAG", raising=False)
        assert is_env_truthy("TEST_FLAG") is False
        assert is_env_truthy("TEST_FLAG", "true") is True


class TestIsEnvSslVerify:
    def test_unset_defaults_to_true(self, monkeypatch):
        monkeypatch.delenv("TEST_SSL", raising=False)
        assert is_env_ssl_verify("TEST_SSL") is True

    @pytest.mark.parametrize("value", ["false", "False", "0", "no", "off"])
    def test_disabled(self, monkeypatch, value):
        monkeypatch.setenv("TEST_SSL", value)
        assert is_env_ssl_verify("TEST_SSL") is False

    def test_other_values_keep_verification(self, monkeypatch):
        monkeypatch.setenv("TEST_SSL", "whatever")
        assert is_env_ssl_verify("TEST_SSL") is True


class TestGetFloatFromEnv:
    def test_valid(self, monkeypatch):
        monkeypatch.setenv("TEST_FLOAT", "2.5")
        assert get_float_from_env("TEST_FLOAT") == 2.5

    def test_invalid_logs_and_defaults(self, monkeypatch, caplog):
        monkeypatch.setenv("TEST_FLOAT", "abc")
        assert get_float_from_env("TEST_FLOAT", 1.0) == 1.0
        assert "Invalid float value for TEST_FLOAT" in caplog.text

    def test_unset(self, monkeypatch):
        monkeypatch.delenv("TEST_FLOAT", raising=False)
        assert get_float_from_env("TEST_FLOAT") is None


class TestGetCustomHeaders:
    def test_unset(self, monkeypatch):
        monkeypatch.delenv("TEST_HEADERS", raising=False)
        assert get_custom_headers("TEST_HEADERS") == {}

    def test_parses_pairs(self, monkeypatch):
        monkeypatch.setenv("TEST_HEADERS", "X-One=1,X-Two=a=b")
        assert get_custom_headers("TEST_HEADERS") == {"X-One": "1", "X-Two": "a=b"}

    def test_skips_malformed(self, monkeypatch):
        monkeypatch.setenv("TEST_HEADERS", "novalue,=empty,,X-Ok=yes")
        assert get_custom_headers("TEST_HEADERS") == {"X-Ok": "yes"}
