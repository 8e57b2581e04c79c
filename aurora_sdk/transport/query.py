"""Query string construction for GET parameters."""

from collections.abc import Mapping
from urllib.parse import urlencode

QueryParams = Mapping[str, str | int | float | bool | None]


def _stringify(value) -> str:
    # Match the API's JS clients: true/false lowercase, 51.0 -> "51"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query(params: QueryParams | None = None) -> str:
    """Serialize params to "?a=1&b=2", or "" when nothing survives.

    None and empty-string values are dropped; everything else keeps its
    insertion order.
    """
    if not params:
        return ""
    pairs = [(key, _stringify(value)) for key, value in params.items() if value is not None and value != ""]
    if not pairs:
        return ""
    return f"?{urlencode(pairs)}"
