import json

import pytest
import typer
from typer.testing import CliRunner

from hetzner_client.cli import _build_client, _list_parameters, app

runner = CliRunner()

API = "https://api.hetzner.cloud/v1"
AUTH = ["--token", "cli-token"]


def _server(server_id, name):
    return {
        "id": server_id,
        "name": name,
        "status": "running",
        "server_type": {"name": "cx22"},
        "datacenter": {"location": {"name": "fsn1"}},
        "public_net": {"ipv4": {"ip": "203.0.113.10"}},
        "labels": {"env": "prod"},
    }


def test_servers_list_renders_table(requests_mock):
    requests_mock.get(f"{API}/servers", json={"servers": [_server(1, "web-1")]})

    result = runner.invoke(app, ["servers", "list", *AUTH])

    assert result.exit_code == 0
    assert "Servers" in result.stdout
    assert "web-1" in result.stdout
    assert "203.0.113.10" in result.stdout


def test_servers_list_json_output_and_filters(requests_mock):
    matcher = requests_mock.get(f"{API}/servers", json={"servers": [_server(1, "web-1")]})

    result = runner.invoke(
        app,
        ["servers", "list", *AUTH, "--json", "--page", "2", "--per-page", "10", "-l", "env=prod"],
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["name"] == "web-1"
    assert matcher.last_request.qs == {
        "page": ["2"],
        "per_page": ["10"],
        "label_selector": ["env=prod"],
    }
    assert matcher.last_request.headers["Authorization"] == "Bearer cli-token"


def test_servers_list_all_pages(requests_mock):
    requests_mock.get(
        f"{API}/servers",
        [
            {"json": {"servers": [_server(1, "a")], "meta": {"pagination": {"page": 1, "next_page": 2}}}},
            {"json": {"servers": [_server(2, "b")], "meta": {"pagination": {"page": 2, "next_page": None}}}},
        ],
    )

    result = runner.invoke(app, ["servers", "list", *AUTH, "--all", "--json"])

    assert result.exit_code == 0
    assert [row["name"] for row in json.loads(result.stdout)] == ["a", "b"]


def test_servers_get(requests_mock):
    requests_mock.get(f"{API}/servers/1", json={"server": _server(1, "web-1")})

    result = runner.invoke(app, ["servers", "get", "1", *AUTH])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["id"] == 1


@pytest.mark.parametrize("command", ["poweron", "poweroff", "reboot"])
def test_server_power_commands(requests_mock, command):
    matcher = requests_mock.post(
        f"{API}/servers/1/actions/{command}",
        json={"action": {"id": 77, "command": command, "status": "running", "progress": 0, "started": "t"}},
    )

    result = runner.invoke(app, ["servers", command, "1", *AUTH])

    assert result.exit_code == 0
    assert matcher.called_once
    assert "Action 77" in result.stdout


def test_api_error_exits_non_zero(requests_mock):
    requests_mock.get(
        f"{API}/servers/404",
        status_code=404,
        json={"error": {"code": "not_found", "message": "server not found"}},
    )

    result = runner.invoke(app, ["servers", "get", "404", *AUTH])

    assert result.exit_code == 1
    assert "status 404" in result.stderr
    assert "Code: not_found" in result.stderr


@pytest.mark.parametrize(
    ("group", "path", "key", "row"),
    [
        ("volumes", "volumes", "volumes", {"id": 1, "name": "data", "size": 10}),
        ("networks", "networks", "networks", {"id": 2, "name": "internal", "ip_range": "10.0.0.0/16"}),
        ("firewalls", "firewalls", "firewalls", {"id": 3, "name": "ssh", "rules": []}),
        ("images", "images", "images", {"id": 4, "name": "ubuntu-24.04", "type": "system"}),
        ("locations", "locations", "locations", {"id": 5, "name": "fsn1", "city": "Falkenstein"}),
        ("server-types", "server_types", "server_types", {"id": 6, "name": "cx22", "cores": 2}),
        ("zones", "zones", "zones", {"id": 7, "name": "example.com", "mode": "primary"}),
    ],
)
def test_list_commands(requests_mock, group, path, key, row):
    requests_mock.get(f"{API}/{path}", json={key: [row]})

    result = runner.invoke(app, [group, "list", *AUTH])

    assert result.exit_code == 0
    assert row["name"] in result.stdout


def test_zones_export_to_file(requests_mock, tmp_path):
    requests_mock.get(f"{API}/zones/example.com/export", json={"zone_file": "$ORIGIN example.com.\n"})
    target = tmp_path / "example.com.zone"

    result = runner.invoke(app, ["zones", "export", "example.com", *AUTH, "--output", str(target)])

    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8") == "$ORIGIN example.com.\n"


def test_zones_export_to_stdout(requests_mock):
    requests_mock.get(f"{API}/zones/example.com/export", json={"zone_file": "$ORIGIN example.com.\n"})

    result = runner.invoke(app, ["zones", "export", "example.com", *AUTH])

    assert result.exit_code == 0
    assert result.stdout == "$ORIGIN example.com.\n"


def test_actions_get(requests_mock):
    requests_mock.get(
        f"{API}/actions/9",
        json={"action": {"id": 9, "command": "start_server", "status": "success", "progress": 100, "started": "t"}},
    )

    result = runner.invoke(app, ["actions", "get", "9", *AUTH])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["status"] == "success"


def test_transport_failure_exits_non_zero(requests_mock):
    import requests

    requests_mock.get(f"{API}/volumes", exc=requests.exceptions.ConnectTimeout("timed out"))

    result = runner.invoke(app, ["volumes", "list", *AUTH])

    assert result.exit_code == 1
    assert "timed out" in result.stderr


def test_build_client_requires_token():
    with pytest.raises(typer.BadParameter):
        _build_client(
            token=None,
            base_url="https://api.hetzner.cloud",
            verify_ssl=True,
            cert_path=None,
            timeout=30.0,
        )


def test_build_client_rejects_invalid_base_url():
    with pytest.raises(typer.BadParameter):
        _build_client(
            token="t",
            base_url="api.hetzner.cloud",
            verify_ssl=True,
            cert_path=None,
            timeout=30.0,
        )


def test_list_parameters_skip_unset_values():
    assert _list_parameters(None, 50, None) == {"per_page": 50}
