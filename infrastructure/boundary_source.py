# ============================================================================
# BOUNDARY DATA SOURCE
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Infrastructure - Boundary GeoJSON retrieval
# PURPOSE: Fetch and parse boundary documents over HTTP
# CREATED: 19 OCT 2026
# ============================================================================
"""
Boundary Data Source

Fetches the GeoJSON document for a layer resource and parses it into a
BoundaryDocument. Every failure mode - transport error, timeout, non-2xx,
non-JSON body, not a FeatureCollection - surfaces as BoundaryLoadError so
the LayerLoader has a single thing to catch.

Timeouts live here (httpx client configuration), not in the loader.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from core.config import HttpDefaults, get_defaults
from core.errors import BoundaryLoadError
from core.logging import ComponentType, get_logger
from core.models import BoundaryDocument

logger = get_logger(__name__, ComponentType.INFRASTRUCTURE)


def parse_boundary_document(payload: Any, resource: str) -> BoundaryDocument:
    """
    Validate a decoded JSON payload as a FeatureCollection.

    Raises:
        BoundaryLoadError: payload is not a FeatureCollection
    """
    if not isinstance(payload, dict):
        raise BoundaryLoadError(
            f"Boundary payload is {type(payload).__name__}, expected an object",
            resource=resource,
        )
    try:
        return BoundaryDocument.model_validate(payload)
    except ValidationError as e:
        raise BoundaryLoadError(
            f"Malformed boundary document: {e.error_count()} validation error(s)",
            resource=resource,
        ) from e


class BoundarySource(ABC):
    """Something that can produce the boundary document for a resource."""

    @abstractmethod
    async def fetch(self, resource: str) -> BoundaryDocument:
        """
        Retrieve and parse a boundary document.

        Raises:
            BoundaryLoadError: on any retrieval or parse failure
        """

    async def aclose(self) -> None:
        """Release held resources. Default: nothing to release."""


class HttpBoundarySource(BoundarySource):
    """
    Async HTTP source: GET {base_url}/{resource}.

    Owns its httpx.AsyncClient unless one is passed in.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        http_config: Optional[HttpDefaults] = None,
    ):
        defaults = get_defaults()
        self._base_url = (base_url or defaults.layers.base_url).rstrip("/")
        http_config = http_config or defaults.http
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(
                http_config.timeout_seconds,
                connect=http_config.connect_timeout_seconds,
            ),
        )

    def url_for(self, resource: str) -> str:
        return f"{self._base_url}/{resource.lstrip('/')}"

    async def fetch(self, resource: str) -> BoundaryDocument:
        url = self.url_for(resource)

        try:
            resp = await self._client.get(url)
        except httpx.TimeoutException as e:
            raise BoundaryLoadError(f"Timed out fetching {url}: {e}", resource=resource) from e
        except httpx.HTTPError as e:
            raise BoundaryLoadError(f"Cannot fetch {url}: {e}", resource=resource) from e

        if resp.status_code >= 400:
            raise BoundaryLoadError(
                f"Boundary server returned {resp.status_code}",
                resource=resource,
                status_code=resp.status_code,
            )

        try:
            payload = resp.json()
        except ValueError as e:
            raise BoundaryLoadError(
                f"Boundary response is not JSON: {e}",
                resource=resource,
                status_code=resp.status_code,
            ) from e

        document = parse_boundary_document(payload, resource)
        logger.debug(f"Fetched {url}: {len(document)} features")
        return document

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = [
    "BoundarySource",
    "HttpBoundarySource",
    "parse_boundary_document",
]
