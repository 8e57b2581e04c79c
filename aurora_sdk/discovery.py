"""Lazily fetched, per-client discovery values: capabilities and the spec document."""

import asyncio

from aurora_sdk.errors import AuroraError, SpecLoadError
from aurora_sdk.logging.request_log import get_logger
from aurora_sdk.models import Capabilities, ClientConfig, SpecDocument
from aurora_sdk.transport.http import Transport

CAPABILITIES_PATH = "/v1/capabilities"


class DiscoveryCache:
    """Holds the two discovery cells for one client instance.

    Each cell is written at most once and never invalidated. A lock per cell
    makes concurrent first callers share a single fetch.
    """

    def __init__(self, transport: Transport, config: ClientConfig):
        self._transport = transport
        self._config = config
        self._capabilities: Capabilities | None = None
        self._spec: SpecDocument | None = None
        self._capabilities_lock = asyncio.Lock()
        self._spec_lock = asyncio.Lock()

    @property
    def cached_capabilities(self) -> Capabilities | None:
        return self._capabilities

    @property
    def cached_spec(self) -> SpecDocument | None:
        return self._spec

    async def capabilities(self) -> Capabilities:
        """Discover which features are installed for this tenant."""
        if self._capabilities is not None:
            return self._capabilities
        async with self._capabilities_lock:
            if self._capabilities is None:
                data = await self._transport.request("GET", CAPABILITIES_PATH)
                self._capabilities = Capabilities.from_dict(data if isinstance(data, dict) else {})
                get_logger().debug(
                    "Capabilities discovered",
                    extra={"context": {
                        "tenant_slug": self._capabilities.tenant_slug,
                        "features": self._capabilities.features,
                    }},
                )
        return self._capabilities

    async def spec(self) -> SpecDocument:
        """Fetch the OpenAPI spec document.

        Raises SpecLoadError on a non-2xx response. Failures are not cached,
        so the next call fetches again.
        """
        if self._spec is not None:
            return self._spec
        async with self._spec_lock:
            if self._spec is None:
                data = await self._transport.request_url(
                    "GET", self._config.spec_url, error_class=SpecLoadError
                )
                self._spec = SpecDocument.from_dict(data if isinstance(data, dict) else {})
        return self._spec

    async def resolved_base_url(self) -> str:
        """Base URL for spec-driven calls: the spec's first server, else {base_url}/v1."""
        try:
            spec = await self.spec()
        except AuroraError as e:
            get_logger().debug(
                "Spec unavailable, using default base URL",
                extra={"context": {"reason": str(e)}},
            )
            return self._config.default_spec_base_url
        return spec.server_url or self._config.default_spec_base_url
