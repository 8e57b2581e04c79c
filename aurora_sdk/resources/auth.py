"""App-user authentication against the spec-resolved API."""

from aurora_sdk.resources.base import Resource


class Auth(Resource):

    async def signin(self, email: str, password: str) -> dict:
        return await self._spec_request("POST", "/auth/signin", body={"email": email, "password": password})

    async def signup(self, email: str, password: str, name: str | None = None) -> dict:
        body = {"email": email, "password": password}
        if name is not None:
            body["name"] = name
        return await self._spec_request("POST", "/auth/signup", body=body)

    async def users(self, limit: int | None = None, offset: int | None = None) -> dict:
        return await self._spec_request("GET", "/auth/users", query={"limit": limit, "offset": offset})

    # Session calls carry the user's token instead of the tenant API key

    async def session(self, token: str) -> dict:
        return await self._spec_request("GET", "/auth/session", bearer_token=token)

    async def signout(self, token: str) -> dict | None:
        return await self._spec_request("POST", "/auth/signout", bearer_token=token)
