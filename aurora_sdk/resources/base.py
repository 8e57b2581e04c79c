"""Shared plumbing for resource facades."""

from urllib.parse import quote

from aurora_sdk.discovery import DiscoveryCache
from aurora_sdk.gating import TenantScope
from aurora_sdk.transport.http import Transport


def segment(value) -> str:
    """Percent-encode one path segment."""
    return quote(str(value), safe="")


class Resource:
    """Base for method groups that compose transport, discovery and gating."""

    def __init__(self, transport: Transport, discovery: DiscoveryCache, scope: TenantScope):
        self._transport = transport
        self._discovery = discovery
        self._scope = scope

    def _child(self, cls, *args):
        return cls(self._transport, self._discovery, self._scope, *args)

    async def _spec_request(self, method: str, path: str, **kwargs):
        """Request against the base URL published in the spec document."""
        base_url = await self._discovery.resolved_base_url()
        return await self._transport.request(method, path, base_url=base_url, **kwargs)
