"""Route coordinator reacting to "selected endpoint changed" events.

A route change replaces the held endpoint id and params, swaps in a fresh
endpoint view and settles back to ACTIVE one tick later. Transitions are
never rejected; a newer change simply overwrites a pending one.
"""

import asyncio
import logging
from enum import Enum

from swagger_explorer.errors import SchemaLookupError
from swagger_explorer.parser.base import Catalogue
from swagger_explorer.request.endpoint import EndpointView, resolve_endpoint

logger = logging.getLogger(__name__)

ROUTE_SETTLE_DELAY = 0.001  # seconds


class RouteState(str, Enum):
    IDLE = "idle"
    TRANSITIONING = "transitioning"
    ACTIVE = "active"


class RouteCoordinator:
    """Holds the active endpoint id, its route params and its endpoint view."""

    def __init__(self, catalogue: Catalogue):
        self.catalogue = catalogue
        self.state = RouteState.IDLE
        self.endpoint_id: str | None = None
        self.params: dict[str, str] = {}
        self.view: EndpointView | None = None
        self.lookup_error: SchemaLookupError | None = None
        self._settled = asyncio.Event()

    def change_route(self, endpoint_id: str, params: dict[str, str] | None = None) -> None:
        """Handle a route change. Must be called from within a running event loop."""
        loop = asyncio.get_running_loop()

        self.state = RouteState.TRANSITIONING
        self._settled.clear()
        self.endpoint_id = endpoint_id
        self.params = dict(params or {})
        self.view, self.lookup_error = self._open_view(endpoint_id)

        loop.call_later(ROUTE_SETTLE_DELAY, self._settle)

    async def settled(self) -> None:
        """Wait until the coordinator is ACTIVE again."""
        await self._settled.wait()

    def require_view(self) -> EndpointView:
        """Return the active view, raising the lookup failure if there is none."""
        if self.view is None:
            raise self.lookup_error or SchemaLookupError("No endpoint selected")
        return self.view

    def _settle(self) -> None:
        self.state = RouteState.ACTIVE
        self._settled.set()

    def _open_view(self, endpoint_id: str) -> tuple[EndpointView | None, SchemaLookupError | None]:
        try:
            endpoint = resolve_endpoint(self.catalogue, endpoint_id)
        except SchemaLookupError as e:
            logger.warning("Cannot resolve route: %s", e)
            return None, e
        return EndpointView(endpoint, self.catalogue), None
