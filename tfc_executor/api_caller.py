from collections.abc import Mapping
import logging
from typing import Dict, Generator, Union

import requests

from .exception import APIException

logger = logging.getLogger(__name__)


class APIResponse(object):
    def __init__(self, response: Mapping):
        self.data = response.get("data", [])
        self.meta = response.get("meta", {})
        self.links = response.get("links", {})
        self.errors = response.get("errors", [])

    def __str__(self):
        if self.errors:
            messages = list()
            for error in self.errors:
                if isinstance(error, Mapping):
                    detail = error.get("detail") or error.get("title")
                    pointer = (error.get("source") or {}).get("pointer")
                    messages.append(f"{detail} ({pointer})" if pointer else f"{detail}")
                else:
                    messages.append(str(error))
            return ", ".join(messages)
        if isinstance(self.data, list):
            return f"Data array with {len(self.data)} elements"
        return f"Data object {self.data.get('type')}/{self.data.get('id')}"


class APICaller(object):
    def __init__(self, host: str, base_url: str, headers: Mapping = None):
        self._host = host.rstrip("/")
        self._base_url = base_url
        self._headers = headers
        self._session = requests.Session()

    def _call(
        self, method: str = "get", path: str = "/", **kwargs
    ) -> Union[APIResponse, bool]:
        if path.startswith("/"):
            url = "".join([self._host, path])
        else:
            url = "/".join([self._host, self._base_url, path])

        logger.debug("%s %s", method.upper(), url)
        response = self._session.request(
            method.upper(), url, headers=self._headers, **kwargs
        )

        if response.status_code >= 400:
            try:
                reason = str(APIResponse(response.json()))
            except ValueError:
                reason = response.text
            raise APIException(
                f"APIError code: {response.status_code} {reason}".strip(), response
            )

        if method != "delete" and response.content:
            response_json = response.json()
            if response_json and "data" in response_json:
                return APIResponse(response_json)
        return True

    def get_list(
        self,
        path: str,
        params: Dict[str, str] = None,
        page_number=1,
        page_size=100,
        **kwargs,
    ) -> Generator[APIResponse, None, None]:
        params = dict(params) if params else dict()
        params["page[size]"] = page_size
        params["page[number]"] = page_number

        while params["page[number]"]:
            api_response = self._call(method="get", path=path, params=params, **kwargs)
            if not isinstance(api_response, APIResponse):
                raise TypeError("api_response is not an APIResponse instance")
            yield api_response

            pagination = (api_response.meta or {}).get("pagination", {})
            params["page[number]"] = pagination.get("next-page")

    def get(self, **kwargs) -> Union[APIResponse, bool]:
        return self._call(method="get", **kwargs)

    def post(self, **kwargs) -> Union[APIResponse, bool]:
        return self._call(method="post", **kwargs)

    def patch(self, **kwargs) -> Union[APIResponse, bool]:
        return self._call(method="patch", **kwargs)

    def delete(self, **kwargs) -> Union[APIResponse, bool]:
        return self._call(method="delete", **kwargs)
