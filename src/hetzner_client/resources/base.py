"""Common helpers for resource wrappers."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from ..models import Record
from ..operations import build_request
from ..pagination import DEFAULT_MAX_PAGES, iterate_pages
from ..responses import (
    ActionResponse,
    CollectionResponse,
    EntityResponse,
    Response,
)

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..transport import Transport

Parameters = Mapping[str, Any]


class ResourceBase:
    """Provide shared helpers for resource modules."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _call(
        self,
        operation_id: str,
        *path_params: str | int,
        parameters: Parameters | None = None,
        response_type: type[Response] = Response,
        **fields: Any,
    ) -> Any:
        api_request = build_request(operation_id, *path_params, parameters=parameters)
        return self._transport.dispatch(api_request, response_type, **fields)

    def _list(
        self,
        operation_id: str,
        *path_params: str | int,
        key: str,
        model: type[Record],
        parameters: Parameters | None = None,
    ) -> CollectionResponse:
        return self._call(
            operation_id,
            *path_params,
            parameters=parameters,
            response_type=CollectionResponse,
            key=key,
            model=model,
        )

    def _entity(
        self,
        operation_id: str,
        *path_params: str | int,
        key: str,
        model: type[Record],
        parameters: Parameters | None = None,
    ) -> EntityResponse:
        return self._call(
            operation_id,
            *path_params,
            parameters=parameters,
            response_type=EntityResponse,
            key=key,
            model=model,
        )

    def _action(
        self,
        operation_id: str,
        *path_params: str | int,
        parameters: Parameters | None = None,
    ) -> ActionResponse:
        return self._call(
            operation_id,
            *path_params,
            parameters=parameters,
            response_type=ActionResponse,
        )

    def _delete(self, operation_id: str, *path_params: str | int) -> Response:
        return self._call(operation_id, *path_params)

    def _iterate(
        self,
        operation_id: str,
        *path_params: str | int,
        key: str,
        model: type[Record],
        parameters: Parameters | None = None,
        max_pages: int = DEFAULT_MAX_PAGES,
    ) -> Iterator[Any]:
        """Yield every record of a paginated list, requesting one page at a time."""

        base = dict(parameters or {})
        start_page = int(base.pop("page", 1) or 1)

        def fetch_page(page: int) -> Mapping[str, Any]:
            response = self._list(
                operation_id,
                *path_params,
                key=key,
                model=model,
                parameters={**base, "page": page},
            )
            return response.data

        for body in iterate_pages(fetch_page, start_page=start_page, max_pages=max_pages):
            for item in body.get(key) or []:
                yield model(item)

    def _find_by_name(
        self,
        operation_id: str,
        *path_params: str | int,
        key: str,
        model: type[Record],
        name: str,
    ) -> Any | None:
        """Return the first record whose name matches exactly, or ``None``."""

        response = self._list(
            operation_id, *path_params, key=key, model=model, parameters={"name": name}
        )
        for item in response.items:
            if item.get("name") == name:
                return item
        return None
