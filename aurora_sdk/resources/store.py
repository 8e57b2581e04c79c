"""Store configuration, pages, delivery slots and checkout."""

from aurora_sdk.gating import TenantScope, requires_feature
from aurora_sdk.resources.base import Resource, segment


class StorePages(Resource):

    async def list(self) -> list[dict]:
        return await self._transport.request("GET", "/v1/store/pages")

    async def get(self, slug: str) -> dict:
        """Page with its blocks: {"slug", "name", "blocks": [...]}."""
        return await self._transport.request("GET", f"/v1/store/pages/{segment(slug)}")


class CheckoutSessions(Resource):

    @requires_feature("store", "Store")
    async def create(self, tenant_slug: str, params: dict) -> dict:
        """Start a hosted checkout. Returns {"id", "url"}.

        params follows the API's wire shape: lineItems, successUrl, cancelUrl,
        and optionally currency, deliverySlotId and metadata.
        """
        path = TenantScope.tenant_path(tenant_slug, "/store/checkout/sessions")
        return await self._transport.request("POST", path, body=params)


class AcmeCheckout(Resource):

    @requires_feature("store", "Store")
    async def get(self, tenant_slug: str, session_id: str) -> dict:
        path = TenantScope.tenant_path(tenant_slug, "/store/checkout/acme")
        return await self._transport.request("GET", path, query={"session": session_id})

    @requires_feature("store", "Store")
    async def complete(self, tenant_slug: str, session_id: str, shipping_address: dict | None = None) -> dict:
        """Complete an Acme session. Returns {"success", "redirectUrl"}."""
        path = TenantScope.tenant_path(tenant_slug, "/store/checkout/acme/complete")
        body = {"sessionId": session_id}
        if shipping_address is not None:
            body["shippingAddress"] = shipping_address
        return await self._transport.request("POST", path, body=body)


class Checkout(Resource):

    def __init__(self, transport, discovery, scope):
        super().__init__(transport, discovery, scope)
        self.sessions = self._child(CheckoutSessions)
        self.acme = self._child(AcmeCheckout)


class Store(Resource):

    def __init__(self, transport, discovery, scope):
        super().__init__(transport, discovery, scope)
        self.pages = self._child(StorePages)
        self.checkout = self._child(Checkout)

    async def config(self) -> dict:
        """Storefront config. Always available; "enabled" is false without a store template."""
        return await self._transport.request("GET", "/v1/store/config")

    @requires_feature("store", "Store")
    async def delivery_slots(self, tenant_slug: str, lat: float, lng: float) -> dict:
        path = TenantScope.tenant_path(tenant_slug, "/store/delivery-slots")
        return await self._transport.request("GET", path, query={"lat": lat, "lng": lng})
