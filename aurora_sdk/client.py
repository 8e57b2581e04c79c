"""Aurora SDK client: discovery-based access for custom front-ends and storefronts.

Authenticates with X-Api-Key. Store, site and holmes operations are gated by
the tenant's capabilities unless a tenant slug is supplied up front.
"""

from typing import Any

import httpx

from aurora_sdk.config.settings import Settings, get_settings
from aurora_sdk.discovery import DiscoveryCache
from aurora_sdk.errors import ConfigurationError
from aurora_sdk.gating import TenantScope
from aurora_sdk.models import Capabilities, ClientConfig, SpecDocument
from aurora_sdk.resources.auth import Auth
from aurora_sdk.resources.events import Events, Webhooks, user_headers
from aurora_sdk.resources.site import Holmes, Site
from aurora_sdk.resources.store import Store
from aurora_sdk.resources.tables import Reports, Tables, Views
from aurora_sdk.transport.http import Transport
from aurora_sdk.transport.query import QueryParams


class AuroraClient:

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        spec_url: str | None = None,
        tenant_slug: str | None = None,
        addressing: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = ClientConfig(
            base_url=base_url,
            api_key=api_key,
            spec_url=spec_url or "",
            tenant_slug=tenant_slug or "",
            addressing=addressing or "",
        )
        self._transport = Transport(self.config, http_client)
        self._discovery = DiscoveryCache(self._transport, self.config)
        scope = TenantScope(self.config, self._discovery)

        parts = (self._transport, self._discovery, scope)
        self.tables = Tables(*parts)
        self.views = Views(*parts)
        self.reports = Reports(*parts)
        self.store = Store(*parts)
        self.site = Site(*parts)
        self.holmes = Holmes(*parts)
        self.auth = Auth(*parts)
        self.events = Events(*parts)
        self.webhooks = Webhooks(*parts)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs) -> "AuroraClient":
        """Build a client from AURORA_* environment variables (or a .env file)."""
        settings = settings or get_settings()
        if not settings.is_configured:
            raise ConfigurationError("AURORA_API_URL and AURORA_API_KEY must be set.")
        return cls(
            settings.aurora_api_url,
            settings.aurora_api_key,
            spec_url=settings.aurora_spec_url or None,
            tenant_slug=settings.aurora_tenant_slug or None,
            **kwargs,
        )

    async def __aenter__(self) -> "AuroraClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    # --- Discovery ---

    async def capabilities(self) -> Capabilities:
        """Features installed for this tenant. Fetched once, then cached."""
        return await self._discovery.capabilities()

    async def get_spec(self) -> SpecDocument:
        """The tenant's OpenAPI document. Cached after the first success."""
        return await self._discovery.spec()

    # --- Spec-driven API ---

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        query: QueryParams | None = None,
        headers: dict | None = None,
    ) -> Any:
        """Call any route relative to the spec's server URL ({base_url}/v1 without a spec)."""
        base_url = await self._discovery.resolved_base_url()
        return await self._transport.request(
            method, path, body=body, query=query, headers=headers, base_url=base_url
        )

    async def search(
        self,
        q: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        vendor_id: str | None = None,
        category: str | None = None,
        sort: str | None = None,
        order: str | None = None,
    ) -> dict:
        query = {
            "q": q,
            "limit": limit,
            "offset": offset,
            "vendorId": vendor_id,
            "category": category,
            "sort": sort,
            "order": order,
        }
        return await self.request("GET", "/search", query=query)

    async def me(self, user_id: str | None = None) -> dict:
        return await self.request("GET", "/me", headers=user_headers(user_id))

    # --- Schema ---

    async def provision_schema(self, schema: dict) -> dict:
        """Create missing tables and fields. Safe to call repeatedly."""
        return await self._transport.request("POST", "/v1/provision-schema", body=schema)
