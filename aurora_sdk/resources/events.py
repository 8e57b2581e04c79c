"""Event ingestion and inbound webhooks on the spec-resolved API."""

from aurora_sdk.resources.base import Resource


def user_headers(user_id: str | None) -> dict | None:
    return {"X-User-Id": user_id} if user_id else None


class Events(Resource):

    async def emit(self, event_type: str, data: dict | None = None, user_id: str | None = None) -> dict | None:
        body = {"type": event_type}
        if data is not None:
            body["data"] = data
        return await self._spec_request("POST", "/events", body=body, headers=user_headers(user_id))

    async def list(
        self,
        event_type: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        user_id: str | None = None,
    ) -> dict:
        query = {"type": event_type, "limit": limit, "offset": offset}
        return await self._spec_request("GET", "/events", query=query, headers=user_headers(user_id))


class Webhooks(Resource):

    async def inbound(self, payload: dict, headers: dict | None = None) -> dict | None:
        """Forward an inbound webhook payload. Extra headers (e.g. signatures) pass through."""
        return await self._spec_request("POST", "/webhooks/inbound", body=payload, headers=headers)
