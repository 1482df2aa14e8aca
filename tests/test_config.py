import pytest

from screener import config


def test_defaults_when_nothing_configured():
    assert config.get_solar_api_url() == config.DEFAULT_SOLAR_API_URL
    assert config.get_request_timeout() == config.REQUEST_TIMEOUT_SECONDS
    assert config.get_log_level() == "INFO"


def test_environment_overrides_default(monkeypatch):
    monkeypatch.setenv("SOLAR_API_URL", "http://localhost:3000/solar")
    monkeypatch.setenv("SOLAR_API_TIMEOUT", "2.5")
    monkeypatch.setenv("SCREENER_LOG_LEVEL", "debug")

    assert config.get_solar_api_url() == "http://localhost:3000/solar"
    assert config.get_request_timeout() == 2.5
    assert config.get_log_level() == "DEBUG"


def test_secrets_take_precedence_over_environment(monkeypatch):
    monkeypatch.setenv("SOLAR_API_URL", "http://env/solar")
    monkeypatch.setattr(
        config, "_read_secret",
        lambda name: "http://secret/solar" if name == "SOLAR_API_URL" else None
    )
    assert config.get_solar_api_url() == "http://secret/solar"


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_invalid_timeout_falls_back(monkeypatch, raw):
    monkeypatch.setenv("SOLAR_API_TIMEOUT", raw)
    assert config.get_request_timeout() == config.REQUEST_TIMEOUT_SECONDS


def test_read_secret_handles_missing_key_and_file(monkeypatch):
    class Secrets(dict):
        pass

    class MissingFile:
        def __getitem__(self, name):
            raise FileNotFoundError("no secrets.toml")

    class FakeSt:
        secrets = Secrets(SOLAR_API_URL="http://secret/solar")

    monkeypatch.undo()
    monkeypatch.setattr(config, "st", FakeSt)
    assert config._read_secret("SOLAR_API_URL") == "http://secret/solar"
    assert config._read_secret("SOLAR_API_TIMEOUT") is None

    FakeSt.secrets = MissingFile()
    assert config._read_secret("SOLAR_API_URL") is None
