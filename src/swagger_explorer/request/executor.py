"""Issue a built request and render the response for display.

Each call sends exactly one request with no retry, no timeout and no
cancellation. Concurrent calls race: the display keeps whichever result
completes last.
"""

import json
import logging
import time

import httpx
from pydantic import BaseModel

from swagger_explorer.config import ExplorerConfig
from swagger_explorer.errors import DisplayError, ExplorerError, NetworkError, ResponseParseError

from .builder import RequestDescriptor

logger = logging.getLogger(__name__)


class DisplayResult(BaseModel):
    """Pretty-printed response text plus an optional structured error."""

    text: str = ""
    status_code: int | None = None
    error: DisplayError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: ExplorerError, text: str = "", status_code: int | None = None) -> "DisplayResult":
        return cls(text=text, status_code=status_code, error=error.to_display())


class ResponseDisplay:
    """The single display slot the presentation layer renders from."""

    def __init__(self):
        self.current: DisplayResult | None = None

    def show(self, result: DisplayResult) -> None:
        self.current = result


def pretty_json(text: str) -> str:
    """Re-serialize a JSON document with 2-space indentation."""
    return json.dumps(json.loads(text), indent=2, ensure_ascii=False)


class RequestExecutor:
    """Executes request descriptors with httpx and converts responses for display."""

    def __init__(
        self,
        config: ExplorerConfig,
        transport: httpx.AsyncBaseTransport | None = None,
        display: ResponseDisplay | None = None,
    ):
        self.config = config
        self.display = display or ResponseDisplay()
        self._transport = transport

    async def execute(self, descriptor: RequestDescriptor) -> DisplayResult:
        result = await self._send(descriptor)
        self.display.show(result)
        return result

    async def _send(self, descriptor: RequestDescriptor) -> DisplayResult:
        logger.info("Making %s request to %s", descriptor.method, descriptor.url)
        start = time.perf_counter()

        try:
            async with httpx.AsyncClient(
                timeout=None, verify=self.config.verify_tls, transport=self._transport
            ) as client:
                response = await client.request(
                    method=descriptor.method,
                    url=descriptor.url,
                    headers=descriptor.headers,
                    content=descriptor.body,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Request to %s failed: %s", descriptor.url, e)
            return DisplayResult.failure(NetworkError(f"Request failed: {e}"))

        elapsed = time.perf_counter() - start
        logger.info("Request completed: %d in %.3fs", response.status_code, elapsed)
        return self._render(response)

    def _render(self, response: httpx.Response) -> DisplayResult:
        status = response.status_code
        try:
            text = pretty_json(response.text)
        except ValueError as e:
            if not response.is_success:
                return DisplayResult.failure(_status_error(response), text=response.text, status_code=status)
            logger.warning("Response from %s is not JSON: %s", response.request.url, e)
            error = ResponseParseError(f"Response body is not valid JSON: {e}")
            return DisplayResult.failure(error, text=response.text, status_code=status)

        if not response.is_success:
            return DisplayResult.failure(_status_error(response), text=text, status_code=status)
        return DisplayResult(text=text, status_code=status)


def _status_error(response: httpx.Response) -> NetworkError:
    logger.warning("Request to %s answered HTTP %d", response.request.url, response.status_code)
    reason = response.reason_phrase or "error"
    return NetworkError(f"HTTP {response.status_code} {reason}", response.status_code)
