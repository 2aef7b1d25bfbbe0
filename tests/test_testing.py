import pytest

from hetzner_client import HetznerClient
from hetzner_client.exceptions import ApiError, SerializationError, TransportError
from hetzner_client.http import RawReply
from hetzner_client.testing import FakeTransport


def test_fake_records_requests_and_answers_from_queue():
    fake = FakeTransport([{"server": {"id": 42, "name": "web-1"}}])
    client = HetznerClient(transport=fake)

    response = client.servers.retrieve(42)

    assert response.entity.name == "web-1"
    fake.assert_sent("servers.retrieve")
    fake.assert_sent("servers.retrieve", 1)
    fake.assert_sent("servers.retrieve", lambda request: request.uri == "/v1/servers/42")
    fake.assert_not_sent("servers.delete")


def test_exhausted_queue_answers_empty_success():
    fake = FakeTransport()
    client = HetznerClient(transport=fake)

    response = client.ssh_keys.delete(1)

    assert response.data == {}


def test_error_replies_are_mapped():
    fake = FakeTransport(
        [RawReply.json({"error": {"code": "locked", "message": "server is locked"}}, status_code=423)]
    )

    with pytest.raises(ApiError) as excinfo:
        HetznerClient(transport=fake).servers.actions.power_on(1)

    assert excinfo.value.code == "locked"
    assert excinfo.value.status_code == 423


def test_queued_exceptions_are_raised():
    fake = FakeTransport([TransportError("connection refused")])

    with pytest.raises(TransportError):
        HetznerClient(transport=fake).locations.list()

    fake.assert_sent("locations.list", 1)


def test_serialization_failures_surface_before_recording():
    fake = FakeTransport()

    with pytest.raises(SerializationError):
        HetznerClient(transport=fake).servers.create({"name": {1, 2}})

    fake.assert_nothing_sent()


def test_assertion_failures():
    fake = FakeTransport()
    client = HetznerClient(transport=fake)

    fake.assert_nothing_sent()
    client.isos.list({"name": "virtio"})

    with pytest.raises(AssertionError):
        fake.assert_nothing_sent()
    with pytest.raises(AssertionError):
        fake.assert_sent("isos.list", 2)
    with pytest.raises(AssertionError):
        fake.assert_sent("isos.list", lambda request: request.parameters.get("name") == "other")
    with pytest.raises(AssertionError):
        fake.assert_not_sent("isos.list")
    with pytest.raises(AssertionError):
        fake.assert_sent("servers.list")


def test_push_extends_queue():
    fake = FakeTransport().push({"locations": [{"id": 1, "name": "fsn1"}]})

    response = HetznerClient(transport=fake).locations.list()

    assert response.items[0].name == "fsn1"
    assert len(fake.requests_for("locations.list")) == 1
