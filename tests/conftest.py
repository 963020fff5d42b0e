import pytest

from firstdata import Config, GatewayClient


class FakeGateway:
    """Stands in for ``requests.post`` and remembers what was sent."""

    def __init__(self):
        self.status_code = 200
        self.text = ""
        self.headers = {"Content-Type": "application/json"}
        self.error = None
        self.calls = []

    def reply(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text
        return self

    def fail(self, exc):
        self.error = exc
        return self

    def __call__(self, url, data=None, headers=None, **kwargs):
        self.calls.append({"url": url, "data": data, "headers": headers, **kwargs})
        if self.error is not None:
            raise self.error
        return type("R", (object,), {"status_code": self.status_code,
                                     "text": self.text,
                                     "headers": self.headers})()

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def settings():
    return Config(gateway_id="AD1234-01", password="s3cret", key_id="98765",
                  hmac_key="hmac-key", api_version="v12", test_mode=True)


@pytest.fixture
def client(settings):
    return GatewayClient(settings=settings)


@pytest.fixture
def gateway(monkeypatch):
    fake = FakeGateway()
    monkeypatch.setattr("firstdata.transport.requests.post", fake)
    return fake
