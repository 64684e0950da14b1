"""Catalogue models built from an API document.

The normalizer converts a raw Swagger/OpenAPI document into these
models; everything downstream reads them and never the raw document.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from swagger_explorer.types import property_type

PAYLOAD_TAG_PREFIX = "payload-"


class Endpoint(BaseModel):
    """One (path, method) operation of the API document."""

    model_config = ConfigDict(frozen=True)

    id: str  # -users-{id}-put
    path: str  # /users/{id}
    method: str
    label: str  # /users/{id}#put
    config: dict  # the operation definition, including its tags

    @property
    def tags(self) -> list[str]:
        return list(self.config.get("tags") or [])

    @property
    def summary(self) -> str:
        return self.config.get("summary", "")

    @property
    def payload_names(self) -> list[str]:
        """Schema names referenced by ``payload-<name>`` tags, in tag order."""
        return [t[len(PAYLOAD_TAG_PREFIX):] for t in self.tags if t.startswith(PAYLOAD_TAG_PREFIX)]


class Model(BaseModel):
    """One named schema from the document's definitions."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    properties: dict = {}
    tags: list[str] = []
    definition: dict = {}  # the raw schema, including type, required, etc.


class Payload(BaseModel):
    """A named example body shape attached to an endpoint by tag.

    Carries the whole schema definition; `properties` and `tags` are lifted
    out of it for convenience.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    properties: dict = {}
    tags: list[str] = []
    definition: dict = {}

    @property
    def required(self) -> list[str]:
        return list(self.definition.get("required") or [])

    def example(self) -> dict[str, Any]:
        """Sketch a request body with a placeholder value per property."""
        return {field: property_type(descriptor).example for field, descriptor in self.properties.items()}


class Catalogue(BaseModel):
    """Normalized endpoints and models of one loaded document."""

    model_config = ConfigDict(frozen=True)

    endpoints: list[Endpoint] = []
    models: list[Model] = []
    info: dict = {}
    format: str = "unknown"  # swagger / openapi / unknown
    ready: bool = False

    @property
    def title(self) -> str:
        return self.info.get("title", "")

    @property
    def version(self) -> str:
        return str(self.info.get("version", ""))

    def find_endpoint(self, endpoint_id: str) -> Endpoint | None:
        return next((e for e in self.endpoints if e.id == endpoint_id), None)

    def find_model(self, name: str) -> Model | None:
        return next((m for m in self.models if m.id == name), None)
