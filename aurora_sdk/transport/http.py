"""HTTP transport: one request in, parsed JSON or a normalized error out."""

import json
from typing import Any

import httpx

from aurora_sdk.errors import AuroraConnectionError, TransportError
from aurora_sdk.logging.request_log import RequestLog
from aurora_sdk.models import ClientConfig
from aurora_sdk.transport.query import QueryParams, build_query


def normalize_error_message(response: httpx.Response) -> str:
    """Best-effort human message for a failed response.

    Uses the JSON body's "error" field when present, else the raw body,
    else the status reason phrase.
    """
    text = response.text
    try:
        parsed = json.loads(text)
    except ValueError:
        return text or response.reason_phrase

    if isinstance(parsed, dict) and parsed.get("error") is not None:
        return str(parsed["error"])
    return text or response.reason_phrase


class Transport:
    """Issues requests against the Aurora API with the client's credentials."""

    def __init__(self, config: ClientConfig, http_client: httpx.AsyncClient | None = None):
        self._config = config
        self._client = http_client
        self._owns_client = http_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            # Calls run to completion: no deadline is applied anywhere
            self._client = httpx.AsyncClient(timeout=None)
            self._owns_client = True
        return self._client

    def _build_headers(self, bearer_token: str | None = None, extra: dict | None = None) -> dict:
        headers = {"Content-Type": "application/json"}
        if bearer_token is not None:
            # User-token calls must not leak the tenant key
            headers["Authorization"] = f"Bearer {bearer_token}"
        else:
            headers["X-Api-Key"] = self._config.api_key
        if extra:
            headers.update(extra)
        return headers

    def build_url(self, path: str, query: QueryParams | None = None, base_url: str | None = None) -> str:
        base = (base_url or self._config.base_url).rstrip("/")
        return f"{base}/{path.lstrip('/')}{build_query(query)}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        query: QueryParams | None = None,
        headers: dict | None = None,
        bearer_token: str | None = None,
        base_url: str | None = None,
    ) -> Any:
        """Send one request and return its parsed JSON body (None for 204).

        Raises:
            TransportError: non-2xx status, message "Aurora API {status}: {message}".
            AuroraConnectionError: no response was received.
        """
        url = self.build_url(path, query, base_url)
        return await self.request_url(
            method, url, body=body, headers=headers, bearer_token=bearer_token
        )

    async def request_url(
        self,
        method: str,
        url: str,
        *,
        body: Any = None,
        headers: dict | None = None,
        bearer_token: str | None = None,
        error_class: type[TransportError] = TransportError,
    ) -> Any:
        """Like request(), for an already absolute URL."""
        request_headers = self._build_headers(bearer_token, headers)
        kwargs = {"headers": request_headers}
        if body is not None:
            kwargs["json"] = body

        client = await self._get_client()
        with RequestLog(method, url) as log:
            try:
                response = await client.request(method, url, **kwargs)
            except httpx.HTTPError as e:
                raise AuroraConnectionError(f"Cannot reach Aurora API: {e}") from e
            log.status = response.status_code

        if not response.is_success:
            raise error_class(
                status_code=response.status_code,
                message=normalize_error_message(response),
                body=response.text,
            )
        if response.status_code == 204:
            return None
        try:
            return response.json()
        except ValueError as e:
            # e.g. an app shell serving index.html with 200
            raise error_class(
                status_code=response.status_code,
                message="Invalid JSON response",
                body=response.text,
            ) from e

    async def aclose(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
