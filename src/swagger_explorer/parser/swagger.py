"""OpenAPI / Swagger document normalizer.

Converts Swagger 2.0 and OpenAPI 3.x documents into a Catalogue of
endpoints and models. No validation against the OpenAPI meta-schema is
done: a malformed document shows up later as a lookup failure.
"""

import logging

from .base import Catalogue, Endpoint, Model
from .detect import detect_format, is_ready, schema_section

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def endpoint_id(path: str, method: str) -> str:
    """Slug for a (path, method) pair: /users/{id} + put -> -users-{id}-put."""
    return f"{path.replace('/', '-')}-{method}"


def normalize(doc: dict) -> Catalogue:
    """Normalize a raw API document into a Catalogue."""
    endpoints = []
    paths = doc.get("paths") or {}

    for path, methods in paths.items():
        for method, operation in (methods or {}).items():
            if method.lower() not in HTTP_METHODS:
                continue

            endpoints.append(
                Endpoint(
                    id=endpoint_id(path, method),
                    path=path,
                    method=method,
                    label=f"{path}#{method}",
                    config=operation or {},
                )
            )

    models = [_parse_model(name, schema) for name, schema in schema_section(doc).items()]

    logger.debug("Normalized %d endpoints and %d models", len(endpoints), len(models))
    return Catalogue(
        endpoints=endpoints,
        models=models,
        info=doc.get("info") or {},
        format=detect_format(doc),
        ready=is_ready(doc),
    )


def _parse_model(name: str, schema: dict | None) -> Model:
    schema = schema or {}
    return Model(
        id=name,
        label=name,
        properties=schema.get("properties") or {},
        tags=schema.get("tags") or [],
        definition=schema,
    )
