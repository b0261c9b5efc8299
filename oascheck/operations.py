"""Operation lookup and content type parsing."""

from __future__ import annotations

from .constants import BOUNDARY, CHARSET, EQUALS, SEMICOLON
from .model import Operation, PathItem, Request

_METHOD_ATTRIBUTES = {
    "GET": "get",
    "POST": "post",
    "PUT": "put",
    "DELETE": "delete",
    "OPTIONS": "options",
    "HEAD": "head",
    "PATCH": "patch",
    "TRACE": "trace",
}


def extract_operation(request: Request, item: PathItem) -> Operation | None:
    """Return the operation of the path item for the request method, or None."""
    attribute = _METHOD_ATTRIBUTES.get(request.method)
    if attribute is None:
        return None
    return getattr(item, attribute)


def extract_content_type(content_type: str) -> tuple[str, str, str]:
    """Split a content type header into (media type, charset, boundary)."""
    charset = boundary = ""
    if SEMICOLON not in content_type:
        return content_type.strip(), charset, boundary
    media_type, *params = content_type.split(SEMICOLON)
    for param in params:
        kv = param.split(EQUALS)
        if len(kv) != 2:
            continue
        key = kv[0].lower().strip()
        if key == CHARSET:
            charset = kv[1].strip()
        if key == BOUNDARY:
            boundary = kv[1].strip()
    return media_type.strip(), charset, boundary