"""Per-endpoint state: method classification, payloads and user input."""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from swagger_explorer.errors import SchemaLookupError
from swagger_explorer.parser.base import Catalogue, Endpoint, Payload

logger = logging.getLogger(__name__)

PAYLOAD_PARAM = "payload"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def is_read(self) -> bool:
        return self is HttpMethod.GET


def classify_method(endpoint_id: str) -> HttpMethod:
    """Classify an endpoint by which method marker its id contains, checked in
    get, post, put order. Anything else is DELETE.

    A path segment can carry the marker too: -get-token-post is a GET.
    """
    if "-get" in endpoint_id:
        return HttpMethod.GET
    if "-post" in endpoint_id:
        return HttpMethod.POST
    if "-put" in endpoint_id:
        return HttpMethod.PUT
    return HttpMethod.DELETE


def resolve_endpoint(catalogue: Catalogue, endpoint_id: str) -> Endpoint:
    endpoint = catalogue.find_endpoint(endpoint_id)
    if endpoint is None:
        raise SchemaLookupError(f"Unknown endpoint: {endpoint_id}")
    return endpoint


def resolve_payloads(endpoint: Endpoint, catalogue: Catalogue) -> list[Payload]:
    """Resolve the endpoint's ``payload-<name>`` tags against the model catalogue."""
    payloads = []
    for name in endpoint.payload_names:
        model = catalogue.find_model(name)
        if model is None:
            raise SchemaLookupError(f"Endpoint {endpoint.id} references unknown schema '{name}'")
        payloads.append(Payload(name=name, properties=model.properties, tags=model.tags, definition=model.definition))
    return payloads


class FetchParams(BaseModel):
    """Immutable snapshot of the values typed into an endpoint's form."""

    model_config = ConfigDict(frozen=True)

    values: dict[str, str] = {}

    def with_value(self, name: str, value: str) -> "FetchParams":
        return FetchParams(values={**self.values, name: value})

    def present(self) -> dict[str, str]:
        """Entries with a non-empty value, in edit order."""
        return {k: v for k, v in self.values.items() if v}

    @property
    def payload(self) -> str | None:
        return self.values.get(PAYLOAD_PARAM) or None


class EndpointView:
    """State owned by the currently selected endpoint.

    Discarded when the user navigates to another endpoint.
    """

    def __init__(self, endpoint: Endpoint, catalogue: Catalogue, params: dict[str, str] | None = None):
        self.endpoint = endpoint
        self.catalogue = catalogue
        self.fetch_params = FetchParams(values=dict(params or {}))
        self.id_param = ""
        self.selected_payload_name: str | None = None

    @property
    def method(self) -> HttpMethod:
        return classify_method(self.endpoint.id)

    @property
    def is_read(self) -> bool:
        return self.method is HttpMethod.GET

    @property
    def is_create(self) -> bool:
        return self.method is HttpMethod.POST

    @property
    def is_update(self) -> bool:
        return self.method is HttpMethod.PUT

    @property
    def is_delete(self) -> bool:
        return self.method is HttpMethod.DELETE

    def update_param(self, name: str, value: str) -> None:
        self.fetch_params = self.fetch_params.with_value(name, value)

    def update_id_param(self, value: str) -> None:
        self.id_param = value

    def select_payload(self, name: str) -> None:
        self.selected_payload_name = name

    @property
    def payloads(self) -> list[Payload]:
        return resolve_payloads(self.endpoint, self.catalogue)

    @property
    def current_payload(self) -> Payload | None:
        """The selected payload, else the first one; None when none resolve."""
        try:
            payloads = self.payloads
        except SchemaLookupError as e:
            logger.warning("No current payload: %s", e)
            return None
        if not payloads:
            return None
        if self.selected_payload_name:
            for payload in payloads:
                if payload.name == self.selected_payload_name:
                    return payload
        return payloads[0]
