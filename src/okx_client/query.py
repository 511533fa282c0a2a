"""
Query-string helpers for OKX request paths.

OKX signs the exact request path, query included, so parameters are
emitted in caller order rather than sorted.
"""

from enum import Enum
from typing import Any, Optional, Sequence, Tuple
from urllib.parse import quote, urlencode

QueryParams = Sequence[Tuple[str, Optional[Any]]]


def _format_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: QueryParams) -> str:
    """Serialize ordered optional parameters into ``?k=v&...`` or ``""``."""
    present = [(key, _format_value(value)) for key, value in params if value is not None]
    if not present:
        return ""
    return "?" + urlencode(present, quote_via=quote, safe="")


def with_query(path: str, params: QueryParams) -> str:
    """Append the query built from ``params`` to ``path``."""
    return f"{path}{build_query(params)}"
