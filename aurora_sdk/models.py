"""Client configuration and discovery models."""

from dataclasses import dataclass, field

from aurora_sdk.errors import ConfigurationError

ADDRESSING_TENANT = "tenant"  # slug supplied at construction, no gating
ADDRESSING_DISCOVERY = "discovery"  # slug and features from /v1/capabilities


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    api_key: str
    spec_url: str = ""  # empty = {base_url}/v1/openapi.json
    tenant_slug: str = ""
    addressing: str = ""  # "tenant" | "discovery"; empty = inferred from tenant_slug

    def __post_init__(self):
        base_url = (self.base_url or "").strip().rstrip("/")
        if not base_url:
            raise ConfigurationError("baseUrl is required.")
        if not self.api_key:
            raise ConfigurationError("apiKey is required.")

        addressing = self.addressing or (
            ADDRESSING_TENANT if self.tenant_slug else ADDRESSING_DISCOVERY
        )
        if addressing not in (ADDRESSING_TENANT, ADDRESSING_DISCOVERY):
            raise ConfigurationError(f"Unknown addressing mode: {self.addressing}")

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "base_url", base_url)
        object.__setattr__(self, "spec_url", self.spec_url or f"{base_url}/v1/openapi.json")
        object.__setattr__(self, "addressing", addressing)

    @property
    def default_spec_base_url(self) -> str:
        """Base URL used by spec-driven calls when no spec is published."""
        return f"{self.base_url}/v1"


@dataclass
class Capabilities:
    tenant_slug: str
    features: dict[str, bool] = field(default_factory=dict)  # absent = disabled

    @classmethod
    def from_dict(cls, data: dict) -> "Capabilities":
        features = data.get("features") or {}
        return cls(
            tenant_slug=data.get("tenantSlug", ""),
            features={name: bool(enabled) for name, enabled in features.items()},
        )

    def is_enabled(self, feature: str) -> bool:
        return self.features.get(feature, False)


@dataclass
class SpecServer:
    url: str
    description: str = ""


@dataclass
class SpecDocument:
    schema_version: str
    servers: list[SpecServer] = field(default_factory=list)  # first entry is authoritative
    paths: dict[str, dict] = field(default_factory=dict)
    raw: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> "SpecDocument":
        servers = [
            SpecServer(url=server.get("url", ""), description=server.get("description", ""))
            for server in data.get("servers") or []
            if isinstance(server, dict)
        ]
        return cls(
            schema_version=str(data.get("openapi", "")),
            servers=servers,
            paths=data.get("paths") or {},
            raw=data,
        )

    @property
    def server_url(self) -> str | None:
        """First server URL without a trailing slash, or None if none is listed."""
        for server in self.servers[:1]:
            if server.url:
                return server.url.rstrip("/")
        return None
