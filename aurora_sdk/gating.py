"""Capability gate for tenant-scoped operations.

A client addresses tenant routes in exactly one of two ways, fixed at
construction:

- tenant: the caller supplied the slug; no capability check is made.
- discovery: slug and feature flags come from /v1/capabilities, and a
  disabled feature stops the call before any request is sent.
"""

import functools
from urllib.parse import quote

from aurora_sdk.discovery import DiscoveryCache
from aurora_sdk.errors import CapabilityUnavailableError, ConfigurationError
from aurora_sdk.models import ADDRESSING_TENANT, ClientConfig


class TenantScope:
    """Resolves the tenant slug for a feature-gated call."""

    def __init__(self, config: ClientConfig, discovery: DiscoveryCache):
        self._config = config
        self._discovery = discovery

    async def resolve(self, feature: str, display_name: str) -> str:
        if self._config.addressing == ADDRESSING_TENANT:
            if not self._config.tenant_slug:
                raise ConfigurationError("tenantSlug is required for this API.")
            return self._config.tenant_slug

        caps = await self._discovery.capabilities()
        if not caps.is_enabled(feature):
            raise CapabilityUnavailableError(feature, display_name)
        return caps.tenant_slug

    @staticmethod
    def tenant_path(slug: str, segment: str) -> str:
        return f"/api/tenants/{quote(slug, safe='')}{segment}"


def requires_feature(feature: str, display_name: str):
    """Gate a facade coroutine on a tenant feature.

    The wrapped method receives the resolved tenant slug as its first
    argument after self; the owning object must expose a `_scope` TenantScope.
    The check runs on every call; only the capability fetch is cached.
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            slug = await self._scope.resolve(feature, display_name)
            return await func(self, slug, *args, **kwargs)
        return wrapper
    return decorator
