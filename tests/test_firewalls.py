from hetzner_client import HetznerClient

API = "https://api.hetzner.cloud/v1"


def build_client():
    return HetznerClient(token="secret-token")


def _action(command, resource_id):
    return {
        "id": resource_id,
        "command": command,
        "status": "running",
        "progress": 0,
        "started": "t",
        "resources": [{"id": resource_id, "type": "server"}],
    }


def test_create_firewall_with_rules(requests_mock):
    rules = [{"direction": "in", "protocol": "tcp", "port": "22", "source_ips": ["0.0.0.0/0"]}]
    matcher = requests_mock.post(
        f"{API}/firewalls",
        status_code=201,
        json={"firewall": {"id": 9, "name": "ssh", "rules": rules}, "actions": []},
    )

    firewall = build_client().firewalls.create({"name": "ssh", "rules": rules}).entity

    assert matcher.last_request.json()["rules"] == rules
    assert firewall.rules == rules
    assert firewall.applied_to == []


def test_set_rules_returns_action_collection(requests_mock):
    requests_mock.post(
        f"{API}/firewalls/9/actions/set_rules",
        json={"actions": [_action("set_firewall_rules", 1), _action("set_firewall_rules", 2)]},
    )

    response = build_client().firewalls.actions.set_rules(9, {"rules": []})

    assert [action.resources[0]["id"] for action in response] == [1, 2]


def test_apply_and_remove_resources(requests_mock):
    apply = requests_mock.post(
        f"{API}/firewalls/9/actions/apply_to_resources",
        json={"actions": [_action("apply_firewall", 1)]},
    )
    remove = requests_mock.post(
        f"{API}/firewalls/9/actions/remove_from_resources",
        json={"actions": [_action("remove_firewall", 1)]},
    )
    target = {"apply_to": [{"type": "label_selector", "label_selector": {"selector": "env=prod"}}]}

    actions = build_client().firewalls.actions
    actions.apply_to_resources(9, target)
    actions.remove_from_resources(9, {"remove_from": target["apply_to"]})

    assert apply.last_request.json() == target
    assert remove.last_request.json()["remove_from"][0]["type"] == "label_selector"
