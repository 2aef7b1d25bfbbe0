import pytest
import requests

from hetzner_client import ClientFactory, HetznerClient
from hetzner_client.exceptions import ConfigurationError
from hetzner_client.testing import FakeTransport


def test_factory_builds_configured_client(requests_mock):
    matcher = requests_mock.get("https://example.test/v1/locations", json={"locations": []})

    client = (
        HetznerClient.factory()
        .with_token("factory-token")
        .with_base_url("https://example.test/v1")
        .with_timeout(5)
        .with_headers({"X-Team": "infra"})
        .make()
    )
    client.locations.list()

    assert client.config.timeout == 5
    assert client.config.base_url == "https://example.test"
    assert matcher.last_request.headers["Authorization"] == "Bearer factory-token"
    assert matcher.last_request.headers["X-Team"] == "infra"


def test_factory_without_token_fails_eagerly():
    with pytest.raises(ConfigurationError):
        ClientFactory().make()


def test_factory_accepts_session():
    session = requests.Session()

    client = ClientFactory().with_token("t").with_session(session).make()

    assert client.transport._session is session


def test_factory_accepts_transport():
    fake = FakeTransport()

    client = ClientFactory().with_transport(fake).make()

    assert client.transport is fake
    assert client.servers._transport is fake
