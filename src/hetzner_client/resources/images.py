"""Image operations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..models import Action, Image
from ..responses import ActionResponse, CollectionResponse, EntityResponse, Response
from .base import ResourceBase


class ImagesResource(ResourceBase):
    """System images, snapshots and backups.

    Images are created through ``servers.actions.create_image``; there is no
    create endpoint on this family.
    """

    def __init__(self, transport) -> None:
        super().__init__(transport)
        self.actions = ImageActionsResource(transport)

    def list(self, parameters: Mapping[str, Any] | None = None) -> CollectionResponse:
        return self._list("images.list", key="images", model=Image, parameters=parameters)

    def iter_all(self, parameters: Mapping[str, Any] | None = None) -> Iterator[Image]:
        return self._iterate("images.list", key="images", model=Image, parameters=parameters)

    def retrieve(self, image_id: str | int) -> EntityResponse:
        return self._entity("images.retrieve", image_id, key="image", model=Image)

    def update(self, image_id: str | int, parameters: Mapping[str, Any]) -> EntityResponse:
        return self._entity(
            "images.update", image_id, key="image", model=Image, parameters=parameters
        )

    def delete(self, image_id: str | int) -> Response:
        return self._delete("images.delete", image_id)


class ImageActionsResource(ResourceBase):
    def list(
        self, image_id: str | int, parameters: Mapping[str, Any] | None = None
    ) -> CollectionResponse:
        return self._list(
            "image_actions.list", image_id, key="actions", model=Action, parameters=parameters
        )

    def retrieve(self, image_id: str | int, action_id: str | int) -> ActionResponse:
        return self._action("image_actions.retrieve", image_id, action_id)

    def change_protection(self, image_id: str | int, parameters: Mapping[str, Any]) -> ActionResponse:
        return self._action("image_actions.change_protection", image_id, parameters=parameters)
