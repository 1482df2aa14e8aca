import pytest
import requests

from screener import config

from .helpers import FakeResponse, solar_payload


@pytest.fixture(autouse=True)
def no_secrets(monkeypatch):
    """Keep tests independent of any local secrets.toml."""
    monkeypatch.setattr(config, "_read_secret", lambda name: None)
    for name in ("SOLAR_API_URL", "SOLAR_API_TIMEOUT", "SCREENER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def solar_api(monkeypatch):
    """
    Replace requests.post with a stub.

    Set `solar_api.response` to a FakeResponse or an exception instance;
    every call is recorded in `solar_api.calls`.
    """
    class Stub:
        def __init__(self):
            self.response = FakeResponse(solar_payload(100, 10))
            self.calls = []

        def post(self, url, **kwargs):
            self.calls.append((url, kwargs))
            if isinstance(self.response, Exception):
                raise self.response
            return self.response

    stub = Stub()
    monkeypatch.setattr(requests, "post", stub.post)
    return stub
