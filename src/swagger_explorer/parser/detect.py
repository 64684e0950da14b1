"""Detect the flavour of an API document and whether it can be explored."""


def detect_format(doc: dict) -> str:
    """Detect the format of a raw API document.

    Returns: 'swagger' (2.0), 'openapi' (3.x) or 'unknown'.
    """
    if not isinstance(doc, dict):
        return "unknown"
    if "swagger" in doc:
        return "swagger"
    if "openapi" in doc:
        return "openapi"
    # Hand-written documents often omit the version marker
    if "definitions" in doc:
        return "swagger"
    if "components" in doc:
        return "openapi"
    return "unknown"


def schema_section(doc: dict) -> dict:
    """Return the named schemas of a document, wherever its format keeps them."""
    if "definitions" in doc:
        return doc.get("definitions") or {}
    components = doc.get("components") or {}
    return components.get("schemas") or {}


def is_ready(doc: dict) -> bool:
    """A document is explorable once it has info, paths and a schema section."""
    if not isinstance(doc, dict):
        return False
    has_schemas = "definitions" in doc or "schemas" in (doc.get("components") or {})
    return "info" in doc and "paths" in doc and has_schemas
