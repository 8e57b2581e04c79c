"""SDK settings loaded from environment variables."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Aurora API
    # Storefronts built on Next.js expose the URL under the public prefix
    aurora_api_url: str = Field(
        default="",
        validation_alias=AliasChoices("AURORA_API_URL", "NEXT_PUBLIC_AURORA_API_URL"),
    )
    aurora_api_key: str = ""  # storefront or workspace scope
    aurora_spec_url: str = ""  # Empty = {aurora_api_url}/v1/openapi.json

    # Tenant addressing
    aurora_tenant_slug: str = ""  # Empty = discover via /v1/capabilities

    # Logging
    log_level: str = "INFO"
    log_file: str = ""  # Empty = stdout only

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def is_configured(self) -> bool:
        return bool(self.aurora_api_url.strip() and self.aurora_api_key.strip())


@lru_cache
def get_settings() -> Settings:
    return Settings()
