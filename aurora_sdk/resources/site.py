"""Site search and store locator, plus Holmes inference."""

from aurora_sdk.gating import TenantScope, requires_feature
from aurora_sdk.resources.base import Resource


class Site(Resource):

    @requires_feature("site", "Site search")
    async def search(
        self,
        tenant_slug: str,
        q: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        vendor_id: str | None = None,
        category: str | None = None,
        sort: str | None = None,
        order: str | None = None,
    ) -> dict:
        """Search the tenant's site. Returns {"hits", "total", "facetDistribution", "provider"}."""
        query = {
            "q": q,
            "limit": limit,
            "offset": offset,
            "vendorId": vendor_id,
            "category": category,
            "sort": sort,
            "order": order,
        }
        path = TenantScope.tenant_path(tenant_slug, "/site/search")
        return await self._transport.request("GET", path, query=query)

    @requires_feature("site", "Site stores")
    async def stores(self, tenant_slug: str) -> dict:
        path = TenantScope.tenant_path(tenant_slug, "/site/stores")
        return await self._transport.request("GET", path)


class Holmes(Resource):

    @requires_feature("holmes", "Holmes")
    async def infer(self, tenant_slug: str, session_id: str) -> dict:
        """Infer the shopper's mission and a product bundle for a session."""
        path = TenantScope.tenant_path(tenant_slug, "/holmes/infer")
        return await self._transport.request("GET", path, query={"sid": session_id})
