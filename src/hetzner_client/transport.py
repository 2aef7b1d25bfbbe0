"""Shared transport handle used by every resource family."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from .auth.base import AuthStrategy
from .config import ClientConfig
from .exceptions import TransportError
from .http import RawReply, ensure_success
from .http import send as http_send
from .meta import MetaInformation
from .request import ApiRequest
from .responses import Response

logger = logging.getLogger(__name__)


class Transport:
    """Send `ApiRequest` values over a `requests.Session` and decode the replies."""

    def __init__(
        self,
        config: ClientConfig,
        auth_strategy: AuthStrategy,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config
        self._auth = auth_strategy
        self._session = session or requests.Session()
        self._suppress_insecure_warning_if_needed()

    def send(self, api_request: ApiRequest) -> RawReply:
        """Perform the HTTP exchange; raises `ApiError` or `TransportError`."""

        url = self.config.url_for(api_request.uri)
        options = api_request.options()
        headers = self._prepare_headers()
        self._log_request(api_request, url)
        try:
            reply = http_send(
                self._session,
                api_request.method,
                url,
                headers=headers,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
                **options,
            )
        except requests.RequestException as exc:
            reason = str(exc).strip() or exc.__class__.__name__
            logger.warning("Hetzner request %s %s failed: %s", api_request.method, url, reason)
            raise TransportError(
                f"Failed to communicate with Hetzner Cloud API: {reason}", details=reason
            ) from exc
        self._log_reply(api_request, reply)
        ensure_success(reply)
        return reply

    def dispatch(
        self,
        api_request: ApiRequest,
        response_type: type[Response] = Response,
        **fields: Any,
    ) -> Any:
        reply = self.send(api_request)
        return response_type.from_reply(reply, **fields)

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------------
    def _prepare_headers(self) -> MutableMapping[str, str]:
        headers = self.config.resolved_headers()
        self._auth.apply(headers)
        return headers

    def _log_request(self, api_request: ApiRequest, url: str) -> None:
        logger.info(
            "Hetzner request %s %s (operation=%s)",
            api_request.method,
            url,
            api_request.operation_id,
        )

    def _log_reply(self, api_request: ApiRequest, reply: RawReply) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        meta = MetaInformation.from_headers(reply.headers)
        logger.debug(
            "Hetzner reply %s for %s (request_id=%s, ratelimit_remaining=%s)",
            reply.status_code,
            api_request.operation_id,
            meta.request_id or "unknown",
            meta.rate_limit_remaining or "unknown",
        )

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.config.verify_ssl, bool) and not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)
