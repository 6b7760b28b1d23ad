from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx
import requests

from cloudinary_lite.domain.types.image import DELIVERY_HOST, RESOURCE_TYPE
from cloudinary_lite.dto.tags import TagList

if TYPE_CHECKING:
    from cloudinary_lite.api.api import Api


class TagsApi:
    """
    Lists images by tag through the public client-side list.

    The list is only served when "Resource list" delivery is allowed in the
    account security settings. Requests are not signed.
    """

    def __init__(self, api: "Api"):
        self._api = api

    def _list_url(self, tag: str) -> str:
        if not tag:
            raise ValueError("tag must be set")
        return (
            f"https://{DELIVERY_HOST}/{self._api.cloud_name}/{RESOURCE_TYPE}/list/"
            f"{quote(tag, safe='')}.json"
        )

    def get_list(self, tag: str) -> TagList:
        """
        Get images with the given tag. An unknown tag gives an empty list.

        :param tag: Tag name.
        :type tag: str
        :return: Tagged resources
        :rtype: :class:`TagList`
        """
        try:
            response = self._api.get(self._list_url(tag))
        except requests.exceptions.HTTPError as error:
            if error.response.status_code == 404:
                return TagList()
            raise error
        return TagList.model_validate(response.json())

    async def get_list_async(self, tag: str) -> TagList:
        try:
            response = await self._api.get_async(self._list_url(tag))
        except httpx.HTTPStatusError as error:
            if error.response.status_code == 404:
                return TagList()
            raise error
        return TagList.model_validate(response.json())
