import pytest
import requests
from urllib3.exceptions import InsecureRequestWarning

from hetzner_client import HetznerClient
from hetzner_client.auth import BearerTokenAuth
from hetzner_client.config import ClientConfig
from hetzner_client.exceptions import (
    ApiError,
    ConfigurationError,
    InvalidResponseBody,
    TransportError,
)

API = "https://api.hetzner.cloud/v1"


def build_client(**overrides):
    options = {"token": "secret-token"}
    options.update(overrides)
    return HetznerClient(**options)


def test_servers_list_returns_typed_items(requests_mock):
    requests_mock.get(
        f"{API}/servers",
        json={"servers": [{"id": 1, "name": "web-1"}], "meta": {"pagination": {"page": 1}}},
    )

    response = build_client().servers.list()

    assert [server.name for server in response] == ["web-1"]


def test_bearer_token_and_default_headers_are_sent(requests_mock):
    matcher = requests_mock.get(f"{API}/locations", json={"locations": []})

    build_client(default_headers={"X-Trace": "t1"}).locations.list()

    headers = matcher.last_request.headers
    assert headers["Authorization"] == "Bearer secret-token"
    assert headers["User-Agent"] == "hetzner-python"
    assert headers["Accept"] == "application/json"
    assert headers["X-Trace"] == "t1"


def test_list_parameters_go_to_query_string(requests_mock):
    matcher = requests_mock.get(f"{API}/servers", json={"servers": []})

    build_client().servers.list({"label_selector": "env=prod", "page": 2, "per_page": 50})

    assert matcher.last_request.qs == {
        "label_selector": ["env=prod"],
        "page": ["2"],
        "per_page": ["50"],
    }
    assert matcher.last_request.body is None


def test_write_parameters_go_to_json_body(requests_mock):
    matcher = requests_mock.post(
        f"{API}/ssh_keys",
        status_code=201,
        json={"ssh_key": {"id": 3, "name": "laptop", "fingerprint": "aa", "public_key": "ssh-ed25519 AAA"}},
    )

    response = build_client().ssh_keys.create({"name": "laptop", "public_key": "ssh-ed25519 AAA"})

    assert matcher.last_request.json() == {"name": "laptop", "public_key": "ssh-ed25519 AAA"}
    assert matcher.last_request.headers["Content-Type"] == "application/json"
    assert response.entity.fingerprint == "aa"


def test_versioned_base_url_is_normalized(requests_mock):
    requests_mock.get(f"{API}/isos", json={"isos": []})

    client = build_client(base_url="https://api.hetzner.cloud/v1/")

    assert client.config.base_url == "https://api.hetzner.cloud"
    client.isos.list()


def test_response_meta_is_extracted(requests_mock):
    requests_mock.get(
        f"{API}/actions/5",
        json={"action": {"id": 5, "command": "x", "status": "success", "progress": 100, "started": "t"}},
        headers={"X-Request-Id": "req-1", "X-RateLimit-Remaining": "3599"},
    )

    response = build_client().actions.retrieve(5)

    assert response.meta.request_id == "req-1"
    assert response.meta.rate_limit_remaining == "3599"
    assert response.meta.rate_limit_limit is None
    assert response.entity.progress == 100


def test_api_error_carries_code_and_message(requests_mock):
    requests_mock.get(
        f"{API}/servers/999",
        status_code=404,
        json={"error": {"code": "not_found", "message": "server with ID '999' not found", "details": {}}},
    )

    with pytest.raises(ApiError) as excinfo:
        build_client().servers.retrieve(999)

    assert excinfo.value.code == "not_found"
    assert excinfo.value.status_code == 404
    assert "not found" in str(excinfo.value)


def test_api_error_without_payload_falls_back_to_status(requests_mock):
    requests_mock.delete(f"{API}/volumes/1", status_code=503, text="upstream down", reason="Service Unavailable")

    with pytest.raises(ApiError) as excinfo:
        build_client().volumes.delete(1)

    assert excinfo.value.code == 503
    assert str(excinfo.value) == "Service Unavailable"


def test_malformed_success_body_raises(requests_mock):
    requests_mock.get(f"{API}/pricing", text="not json")

    with pytest.raises(InvalidResponseBody):
        build_client().billing.list_pricing()


def test_empty_delete_reply_is_accepted(requests_mock):
    requests_mock.delete(f"{API}/ssh_keys/3", status_code=204, content=b"")

    response = build_client().ssh_keys.delete(3)

    assert response.data == {}


def test_request_logging_includes_operation(caplog, requests_mock):
    requests_mock.get(f"{API}/server_types", json={"server_types": []})

    with caplog.at_level("INFO", logger="hetzner_client.transport"):
        build_client().server_types.list()

    assert "operation=server_types.list" in caplog.text
    assert "GET https://api.hetzner.cloud/v1/server_types" in caplog.text


def test_reply_metadata_is_logged_at_debug(caplog, requests_mock):
    requests_mock.get(
        f"{API}/certificates", json={"certificates": []}, headers={"x-request-id": "dbg-7"}
    )

    with caplog.at_level("DEBUG", logger="hetzner_client.transport"):
        build_client().certificates.list()

    assert "request_id=dbg-7" in caplog.text


def test_transport_error_includes_root_cause(caplog):
    class ExplodingSession:
        def request(self, *args, **kwargs):  # pragma: no cover - helper
            raise requests.exceptions.SSLError("CERTIFICATE_VERIFY_FAILED")

        def close(self):  # pragma: no cover - helper
            pass

    client = build_client(session=ExplodingSession())

    with caplog.at_level("WARNING", logger="hetzner_client.transport"):
        with pytest.raises(TransportError) as excinfo:
            client.servers.list()

    assert "CERTIFICATE_VERIFY_FAILED" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, requests.exceptions.SSLError)
    assert "failed" in caplog.text


@pytest.mark.parametrize("token", [None, "", "   "])
def test_missing_token_is_rejected_eagerly(token):
    with pytest.raises(ConfigurationError):
        HetznerClient(token=token)


@pytest.mark.parametrize("base_url", ["", "ftp://api.hetzner.cloud", "not a url"])
def test_invalid_base_url_is_rejected_eagerly(base_url):
    with pytest.raises(ConfigurationError):
        build_client(base_url=base_url)


def test_invalid_timeout_is_rejected():
    with pytest.raises(ConfigurationError):
        ClientConfig(timeout=0)


def test_custom_auth_strategy(requests_mock):
    matcher = requests_mock.get(f"{API}/images", json={"images": []})
    auth = BearerTokenAuth("first")
    client = HetznerClient(auth_strategy=auth)

    auth.update_token("rotated")
    client.images.list()

    assert matcher.last_request.headers["Authorization"] == "Bearer rotated"
    assert "rotated" not in repr(auth)


def test_request_escape_hatch(requests_mock):
    matcher = requests_mock.post(
        f"{API}/servers/7/actions/change_dns_ptr",
        json={"action": {"id": 1, "command": "change_dns_ptr", "status": "running", "progress": 0, "started": "t"}},
    )

    response = build_client().request(
        "server_actions.change_dns_ptr", 7, parameters={"ip": "203.0.113.1", "dns_ptr": "web.example.com"}
    )

    assert response.action.command == "change_dns_ptr"
    assert matcher.last_request.json()["dns_ptr"] == "web.example.com"


def test_no_request_is_sent_at_construction(requests_mock):
    build_client()

    assert requests_mock.call_count == 0


def test_families_share_one_transport():
    client = build_client()

    assert client.servers._transport is client.transport
    assert client.servers.actions._transport is client.transport
    assert client.dns_zones.rrsets._transport is client.transport


def test_disables_insecure_warning_when_verify_disabled(monkeypatch):
    captured: list[object] = []

    def fake_disable(warning):  # pragma: no cover - helper
        captured.append(warning)

    monkeypatch.setattr(
        "hetzner_client.transport.urllib3.disable_warnings",
        fake_disable,
    )

    build_client(verify_ssl=False)

    assert captured and captured[0] is InsecureRequestWarning


def test_context_manager_closes_session():
    closed: list[bool] = []

    class RecordingSession(requests.Session):
        def close(self):
            closed.append(True)
            super().close()

    with build_client(session=RecordingSession()):
        pass

    assert closed == [True]
