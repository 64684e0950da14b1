"""Turn an endpoint plus user input into a request descriptor.

No network activity happens here; the descriptor is handed to the executor.
"""

import json

import httpx
from pydantic import BaseModel, ConfigDict

from swagger_explorer.config import ExplorerConfig
from swagger_explorer.errors import UserInputParseError
from swagger_explorer.parser.base import Endpoint

from .endpoint import EndpointView, FetchParams, classify_method

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class RequestDescriptor(BaseModel):
    """A fully resolved request, ready for execution."""

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    headers: dict[str, str] = {}
    body: str | None = None


def path_prefix(path: str) -> str:
    """Literal part of a path template before its first placeholder.

    /users/{id}/roles -> /users. Placeholders are never substituted.
    """
    if "{" not in path:
        return path
    prefix = path.split("{", 1)[0]
    return prefix.removesuffix("/")


def normalize_payload(text: str) -> str:
    """Parse the payload text and re-serialize it compactly."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise UserInputParseError(f"Payload is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


class RequestBuilder:
    """Builds request descriptors against the configured API root."""

    def __init__(self, config: ExplorerConfig):
        self.config = config

    def build(self, endpoint: Endpoint, fetch_params: FetchParams, id_param: str | None = None) -> RequestDescriptor:
        url = self.config.base_path.rstrip("/") + path_prefix(endpoint.path)
        if id_param:
            url += f"/{id_param}"

        method = classify_method(endpoint.id)

        if method.is_read:
            query = str(httpx.QueryParams(fetch_params.present()))
            if query:
                url = f"{url}?{query}"
            return RequestDescriptor(method=method.value, url=url)

        body = None
        if fetch_params.payload:
            body = normalize_payload(fetch_params.payload)

        return RequestDescriptor(method=method.value, url=url, headers=dict(JSON_HEADERS), body=body)

    def build_for(self, view: EndpointView) -> RequestDescriptor:
        """Build the request for an endpoint view's current input."""
        return self.build(view.endpoint, view.fetch_params, view.id_param)
