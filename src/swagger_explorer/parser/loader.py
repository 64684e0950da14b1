"""Load an API document from the configured API root or from a local file."""

import json
import logging
from pathlib import Path

import httpx
import yaml

from swagger_explorer.config import ExplorerConfig
from swagger_explorer.errors import NetworkError, ResponseParseError, SchemaLookupError

from .base import Catalogue
from .swagger import normalize

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Fetches ``{base_path}/swagger.json`` and builds the catalogue from it."""

    def __init__(self, config: ExplorerConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport

    async def fetch(self) -> dict:
        """Fetch and decode the API document over HTTP."""
        url = self.config.schema_url
        logger.info("Fetching API document from %s", url)
        try:
            async with httpx.AsyncClient(
                timeout=None, verify=self.config.verify_tls, transport=self._transport
            ) as client:
                response = await client.get(url, headers={"Accept": "application/json"})
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"Could not fetch {url}: {e}") from e

        if not response.is_success:
            raise NetworkError(f"Could not fetch {url}: HTTP {response.status_code}", response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise ResponseParseError(f"API document at {url} is not valid JSON: {e}") from e

    async def load(self) -> Catalogue:
        return build_catalogue(await self.fetch())

    def load_file(self, file_path: Path) -> Catalogue:
        return build_catalogue(read_document(file_path))


def read_document(file_path: Path) -> dict:
    """Read a JSON or YAML API document from disk."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ResponseParseError(f"{file_path} is not UTF-8 text: {e}") from e

    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as yaml_error:
        # Tab-indented JSON is valid JSON but not valid YAML
        try:
            doc = json.loads(text)
        except ValueError:
            raise ResponseParseError(f"{file_path} is neither JSON nor YAML: {yaml_error}") from yaml_error

    if not isinstance(doc, dict):
        raise ResponseParseError(f"{file_path} does not contain an API document")
    return doc


def build_catalogue(doc: dict) -> Catalogue:
    """Normalize a document, refusing ones that lack info, paths or schemas."""
    catalogue = normalize(doc) if isinstance(doc, dict) else None
    if catalogue is None or not catalogue.ready:
        raise SchemaLookupError("API document is missing one of: info, paths, definitions")
    return catalogue
