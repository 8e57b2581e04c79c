"""Tables, records, views and reports. Always available under /v1."""

from aurora_sdk.resources.base import Resource, segment


class Records(Resource):

    def __init__(self, transport, discovery, scope, table_slug: str):
        super().__init__(transport, discovery, scope)
        self._base = f"/v1/tables/{segment(table_slug)}/records"

    async def list(
        self,
        limit: int | None = None,
        offset: int | None = None,
        sort: str | None = None,
        order: str | None = None,
        filter: str | None = None,
    ) -> dict:
        """Page through records. Returns {"data": [...], "total", "limit", "offset"}."""
        query = {"limit": limit, "offset": offset, "sort": sort, "order": order, "filter": filter}
        return await self._transport.request("GET", self._base, query=query)

    async def get(self, record_id: str) -> dict:
        return await self._transport.request("GET", f"{self._base}/{segment(record_id)}")

    async def create(self, data: dict) -> dict:
        return await self._transport.request("POST", self._base, body=data)

    async def update(self, record_id: str, data: dict) -> dict:
        return await self._transport.request("PATCH", f"{self._base}/{segment(record_id)}", body=data)

    async def delete(self, record_id: str) -> None:
        return await self._transport.request("DELETE", f"{self._base}/{segment(record_id)}")


class SectionViews(Resource):

    def __init__(self, transport, discovery, scope, table_slug: str):
        super().__init__(transport, discovery, scope)
        self._path = f"/v1/tables/{segment(table_slug)}/views"

    async def list(self) -> list[dict]:
        return await self._transport.request("GET", self._path)


class TableHandle(Resource):
    """Operations scoped to one table."""

    def __init__(self, transport, discovery, scope, table_slug: str):
        super().__init__(transport, discovery, scope)
        self.slug = table_slug
        self.records = self._child(Records, table_slug)
        self.section_views = self._child(SectionViews, table_slug)


class Tables(Resource):

    async def list(self) -> list[dict]:
        """List tables as [{"slug", "name"}, ...]."""
        return await self._transport.request("GET", "/v1/tables")

    def for_table(self, slug: str) -> TableHandle:
        return self._child(TableHandle, slug)


class ViewHandle(Resource):

    def __init__(self, transport, discovery, scope, view_slug: str):
        super().__init__(transport, discovery, scope)
        self.slug = view_slug

    async def data(self) -> dict:
        return await self._transport.request("GET", f"/v1/views/{segment(self.slug)}/data")


class Views(Resource):

    async def list(self) -> list[dict]:
        return await self._transport.request("GET", "/v1/views")

    def for_view(self, slug: str) -> ViewHandle:
        return self._child(ViewHandle, slug)


class ReportHandle(Resource):

    def __init__(self, transport, discovery, scope, report_id: str):
        super().__init__(transport, discovery, scope)
        self.id = report_id

    async def data(self) -> dict:
        return await self._transport.request("GET", f"/v1/reports/{segment(self.id)}/data")


class Reports(Resource):

    async def list(self) -> list[dict]:
        return await self._transport.request("GET", "/v1/reports")

    def for_report(self, report_id: str) -> ReportHandle:
        return self._child(ReportHandle, report_id)
