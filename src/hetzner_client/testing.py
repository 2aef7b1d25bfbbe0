"""In-memory transport for exercising code that uses `HetznerClient`.

Queue replies, hand the fake to the client and assert on what was sent::

    fake = FakeTransport([{"server": {...}}])
    client = HetznerClient(transport=fake)
    client.servers.retrieve(42)
    fake.assert_sent("servers.retrieve", lambda request: request.uri == "/v1/servers/42")
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Union

from .config import ClientConfig
from .http import RawReply, ensure_success
from .request import ApiRequest
from .transport import Transport

logger = logging.getLogger(__name__)

QueuedReply = Union[RawReply, Mapping[str, Any], BaseException]


class FakeTransport(Transport):
    """Record dispatched requests and answer them from a queue.

    Queue items are a `RawReply`, a mapping (sent back as a 200 JSON body)
    or an exception instance (raised as-is). Error statuses go through the
    same `ApiError` mapping as the real transport. Once the queue is empty
    every request is answered with an empty 200.
    """

    def __init__(
        self,
        responses: Iterable[QueuedReply] | None = None,
        *,
        config: ClientConfig | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.sent: list[ApiRequest] = []
        self._queue: deque[QueuedReply] = deque(responses or [])

    def push(self, *responses: QueuedReply) -> FakeTransport:
        self._queue.extend(responses)
        return self

    def send(self, api_request: ApiRequest) -> RawReply:
        if api_request.has_body:
            # encode now so unserializable parameters fail before being recorded
            api_request.body()
        self.sent.append(api_request)
        logger.info(
            "Fake request %s %s (operation=%s)",
            api_request.method,
            api_request.uri,
            api_request.operation_id,
        )
        reply = self._next_reply()
        ensure_success(reply)
        return reply

    def close(self) -> None:
        return None

    def requests_for(self, operation_id: str) -> list[ApiRequest]:
        return [request for request in self.sent if request.operation_id == operation_id]

    # Assertions -------------------------------------------------------------
    def assert_sent(
        self,
        operation_id: str,
        expectation: Callable[[ApiRequest], bool] | int | None = None,
    ) -> None:
        """Fail unless ``operation_id`` was sent.

        ``expectation`` is either a predicate that at least one matching
        request must satisfy, or the exact number of matching requests.
        """

        matching = self.requests_for(operation_id)
        if isinstance(expectation, int) and not isinstance(expectation, bool):
            if len(matching) != expectation:
                raise AssertionError(
                    f"Expected {operation_id} to be sent {expectation} time(s), "
                    f"was sent {len(matching)} time(s)."
                )
            return
        if not matching:
            raise AssertionError(f"Expected {operation_id} to be sent, but it was not.")
        if expectation is not None and not any(expectation(request) for request in matching):
            raise AssertionError(
                f"{operation_id} was sent, but no request matched the given predicate."
            )

    def assert_not_sent(self, operation_id: str) -> None:
        if self.requests_for(operation_id):
            raise AssertionError(f"Unexpected request sent for {operation_id}.")

    def assert_nothing_sent(self) -> None:
        if self.sent:
            sent = ", ".join(request.operation_id for request in self.sent)
            raise AssertionError(f"Expected no requests, but sent: {sent}.")

    # Internal helpers -------------------------------------------------------
    def _next_reply(self) -> RawReply:
        if not self._queue:
            return RawReply(status_code=200)
        item = self._queue.popleft()
        if isinstance(item, BaseException):
            raise item
        if isinstance(item, RawReply):
            return item
        return RawReply.json(item)


__all__ = ["FakeTransport"]
