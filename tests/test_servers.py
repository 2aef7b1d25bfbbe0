import pytest

from hetzner_client import HetznerClient
from hetzner_client.exceptions import PaginationError

API = "https://api.hetzner.cloud/v1"


def build_client():
    return HetznerClient(token="secret-token")


def _action(command, status="running"):
    return {"id": 11, "command": command, "status": status, "progress": 0, "started": "t"}


def test_create_server_returns_entity_action_and_password(requests_mock):
    matcher = requests_mock.post(
        f"{API}/servers",
        status_code=201,
        json={
            "server": {"id": 42, "name": "web-1"},
            "action": _action("create_server"),
            "next_actions": [_action("start_server")],
            "root_password": "pw",
        },
    )

    response = build_client().servers.create(
        {"name": "web-1", "server_type": "cx22", "image": "ubuntu-24.04", "location": "fsn1"}
    )

    assert matcher.last_request.json()["server_type"] == "cx22"
    assert response.entity.get("id") == 42
    assert response.action.command == "create_server"
    assert [action.command for action in response.next_actions] == ["start_server"]
    assert response.get("root_password") == "pw"


def test_update_uses_put(requests_mock):
    matcher = requests_mock.put(f"{API}/servers/42", json={"server": {"id": 42, "name": "renamed"}})

    build_client().servers.update(42, {"name": "renamed", "labels": {"env": "prod"}})

    assert matcher.last_request.json() == {"name": "renamed", "labels": {"env": "prod"}}


def test_delete_returns_action(requests_mock):
    requests_mock.delete(f"{API}/servers/42", json={"action": _action("delete_server")})

    response = build_client().servers.delete(42)

    assert response.action.command == "delete_server"


@pytest.mark.parametrize(
    ("method", "verb"),
    [
        ("power_on", "poweron"),
        ("power_off", "poweroff"),
        ("reboot", "reboot"),
        ("shutdown", "shutdown"),
        ("reset", "reset"),
        ("reset_password", "reset_password"),
        ("detach_iso", "detach_iso"),
        ("remove_from_placement_group", "remove_from_placement_group"),
        ("enable_backups", "enable_backup"),
        ("disable_backups", "disable_backup"),
        ("disable_rescue_mode", "disable_rescue"),
    ],
)
def test_parameterless_actions(requests_mock, method, verb):
    matcher = requests_mock.post(f"{API}/servers/42/actions/{verb}", json={"action": _action(verb)})

    response = getattr(build_client().servers.actions, method)(42)

    assert response.action.command == verb
    assert matcher.last_request.json() == {}


def test_rebuild_sends_image(requests_mock):
    matcher = requests_mock.post(
        f"{API}/servers/42/actions/rebuild",
        json={"action": _action("rebuild_server"), "root_password": None},
    )

    build_client().servers.actions.rebuild(42, {"image": "ubuntu-24.04"})

    assert matcher.last_request.json() == {"image": "ubuntu-24.04"}


def test_request_console(requests_mock):
    requests_mock.post(
        f"{API}/servers/42/actions/request_console",
        json={"action": _action("request_console"), "wss_url": "wss://c", "password": "p"},
    )

    console = build_client().servers.actions.request_console(42)

    assert console.wss_url == "wss://c"
    assert console.password == "p"


def test_change_reverse_dns(requests_mock):
    matcher = requests_mock.post(
        f"{API}/servers/42/actions/change_dns_ptr", json={"action": _action("change_dns_ptr")}
    )

    build_client().servers.actions.change_reverse_dns(
        42, {"ip": "203.0.113.10", "dns_ptr": "web.example.com"}
    )

    assert matcher.last_request.json()["ip"] == "203.0.113.10"


def test_server_action_listing(requests_mock):
    matcher = requests_mock.get(
        f"{API}/servers/42/actions",
        json={"actions": [_action("start_server", "success")]},
    )

    response = build_client().servers.actions.list(42, {"status": "success"})

    assert matcher.last_request.qs == {"status": ["success"]}
    assert response.items[0].status == "success"


def test_metrics_use_query_parameters(requests_mock):
    matcher = requests_mock.get(
        f"{API}/servers/42/metrics",
        json={"metrics": {"start": "s", "end": "e", "step": 60, "time_series": {"cpu": {"values": []}}}},
    )

    response = build_client().servers.metrics(
        42, {"type": "cpu", "start": "2024-01-01t00:00:00z", "end": "2024-01-01t01:00:00z"}
    )

    assert matcher.last_request.qs["type"] == ["cpu"]
    assert response.entity.step == 60


def test_iter_all_follows_pages(requests_mock):
    requests_mock.get(
        f"{API}/servers",
        [
            {
                "json": {
                    "servers": [{"id": 1, "name": "a"}],
                    "meta": {"pagination": {"page": 1, "next_page": 2}},
                }
            },
            {
                "json": {
                    "servers": [{"id": 2, "name": "b"}],
                    "meta": {"pagination": {"page": 2, "next_page": None}},
                }
            },
        ],
    )

    names = [server.name for server in build_client().servers.iter_all({"per_page": 1})]

    assert names == ["a", "b"]
    pages = [request.qs["page"] for request in requests_mock.request_history]
    assert pages == [["1"], ["2"]]


def test_iter_all_stops_on_pagination_loop(requests_mock):
    requests_mock.get(
        f"{API}/servers",
        json={"servers": [], "meta": {"pagination": {"page": 1, "next_page": 1}}},
    )

    with pytest.raises(PaginationError):
        list(build_client().servers.iter_all())


def test_get_by_name(requests_mock):
    matcher = requests_mock.get(
        f"{API}/servers", json={"servers": [{"id": 1, "name": "web-1"}]}
    )

    server = build_client().servers.get_by_name("web-1")

    assert server.get("id") == 1
    assert matcher.last_request.qs == {"name": ["web-1"]}


def test_get_by_name_returns_none(requests_mock):
    requests_mock.get(f"{API}/servers", json={"servers": []})

    assert build_client().servers.get_by_name("missing") is None
