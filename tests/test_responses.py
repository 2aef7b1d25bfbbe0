import io

import pytest
import requests
from urllib3 import HTTPHeaderDict, HTTPResponse

from hetzner_client.exceptions import InvalidResponseBody, MissingFieldError
from hetzner_client.http import RawReply
from hetzner_client.meta import MetaInformation
from hetzner_client.models import Server
from hetzner_client.responses import (
    ActionResponse,
    CollectionResponse,
    ConsoleResponse,
    EntityResponse,
    Response,
    ZoneFileResponse,
    decode_body,
)


def test_empty_body_decodes_to_empty_mapping():
    response = Response.from_reply(RawReply(status_code=204, body=b""))

    assert response.data == {}
    assert response.to_dict() == {}


def test_malformed_body_is_rejected():
    with pytest.raises(InvalidResponseBody):
        Response.from_reply(RawReply(status_code=200, body=b"<html>oops</html>"))


def test_non_object_root_is_rejected():
    with pytest.raises(InvalidResponseBody):
        decode_body(b"[1, 2, 3]")


def test_request_id_header_is_case_insensitive():
    reply = RawReply(status_code=200, headers={"X-Request-Id": "abc123"}, body=b"{}")

    meta = Response.from_reply(reply).meta

    assert meta.request_id == "abc123"


def test_missing_rate_limit_headers_are_absent():
    meta = MetaInformation.from_headers({"Content-Type": "application/json"})

    assert meta.rate_limit_limit is None
    assert meta.rate_limit_remaining is None
    assert meta.rate_limit_reset is None


def test_rate_limit_headers_pass_through_verbatim():
    meta = MetaInformation.from_headers(
        {
            "X-RateLimit-Limit": "3600",
            "x-ratelimit-remaining": "3599",
            "X-RATELIMIT-RESET": "1731000000",
        }
    )

    assert meta.to_dict() == {
        "x-request-id": None,
        "x-ratelimit-limit": "3600",
        "x-ratelimit-remaining": "3599",
        "x-ratelimit-reset": "1731000000",
    }


def test_header_values_with_commas_are_kept_verbatim():
    assert MetaInformation.from_headers({"x-request-id": "abc,def"}).request_id == "abc,def"


def test_repeated_header_keeps_first_value():
    assert MetaInformation.from_headers({"x-request-id": ["one", "two"]}).request_id == "one"


def test_reply_keeps_repeated_headers_apart():
    raw_headers = HTTPHeaderDict()
    raw_headers.add("X-Request-Id", "first")
    raw_headers.add("X-Request-Id", "second")
    raw_headers.add("X-RateLimit-Remaining", "10,5")
    response = requests.Response()
    response.status_code = 200
    response.raw = HTTPResponse(
        body=io.BytesIO(b"{}"), headers=raw_headers, status=200, preload_content=False
    )

    reply = RawReply.from_response(response)
    meta = Response.from_reply(reply).meta

    assert reply.headers["x-request-id"] == ["first", "second"]
    assert meta.request_id == "first"
    assert meta.rate_limit_remaining == "10,5"


def test_entity_response_requires_its_key():
    response = EntityResponse.from_reply(RawReply.json({}), key="server", model=Server)

    with pytest.raises(MissingFieldError) as excinfo:
        response.entity

    assert excinfo.value.field == "server"
    assert isinstance(excinfo.value, KeyError)


def test_collection_response_defaults_to_empty_list():
    response = CollectionResponse.from_reply(RawReply.json({}), key="servers", model=Server)

    assert response.items == []
    assert len(response) == 0
    assert response.pagination().total == 0


def test_collection_response_wraps_items():
    payload = {
        "volumes": [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}],
        "meta": {"pagination": {"page": 1, "per_page": 2, "total_entries": 4, "next_page": 2}},
    }

    response = CollectionResponse.from_reply(RawReply.json(payload), key="volumes")

    assert [item.get("name") for item in response] == ["a", "b"]
    assert response.pagination().has_more_pages is True


def test_action_is_optional_on_plain_responses_and_required_on_action_responses():
    assert Response.from_reply(RawReply.json({"server": {}})).action is None

    with pytest.raises(MissingFieldError):
        ActionResponse.from_reply(RawReply.json({})).action


def test_console_response_fields():
    payload = {
        "action": {"id": 9, "command": "request_console", "status": "success", "progress": 100, "started": "now"},
        "wss_url": "wss://console.hetzner.cloud/?server_id=1&token=abc",
        "password": "secret",
    }

    response = ConsoleResponse.from_reply(RawReply.json(payload))

    assert response.action.command == "request_console"
    assert response.wss_url.startswith("wss://")
    assert response.password == "secret"


def test_zone_file_defaults_to_empty_string():
    assert ZoneFileResponse.from_reply(RawReply.json({})).zone_file == ""


def test_to_dict_is_a_copy():
    response = Response.from_reply(RawReply.json({"labels": {"env": "prod"}}))

    copied = response.to_dict()
    copied["labels"]["env"] = "dev"

    assert response.get("labels") == {"env": "prod"}
