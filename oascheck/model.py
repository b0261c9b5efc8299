"""A small OpenAPI document model and HTTP message types used by the validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit


@dataclass(frozen=True)
class Location:
    """A line and column in the specification; zero when unknown."""

    line: int = 0
    column: int = 0


def _lookup_location(locations: dict[str, Location], name: str) -> Location:
    return locations.get(name, Location())


@dataclass
class Schema:
    """A JSON schema. Location keys: "type", "enum", "items"."""

    type: list[str] = field(default_factory=list)
    enum: list[Any] | None = None
    items: Schema | bool | None = None
    additional_properties: Schema | bool | None = None
    properties: dict[str, Schema] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    locations: dict[str, Location] = field(default_factory=dict)

    def location(self, field: str) -> Location:
        """Return where the named field sits in the specification."""
        return _lookup_location(self.locations, field)


@dataclass
class MediaType:
    """A media type entry of a content map."""

    schema: Schema | None = None
    location: Location = field(default_factory=Location)


@dataclass
class Parameter:
    """An operation parameter. Location keys: "explode", "style", "required", "schema"."""

    name: str = ""
    in_: str = ""
    style: str = ""
    explode: bool | None = None
    required: bool = False
    allow_reserved: bool = False
    schema: Schema | None = None
    content: dict[str, MediaType] = field(default_factory=dict)
    locations: dict[str, Location] = field(default_factory=dict)

    def is_exploded(self) -> bool:
        """True only when explode is explicitly set to true."""
        return bool(self.explode)

    def location(self, field: str) -> Location:
        """Return where the named field sits in the specification."""
        return _lookup_location(self.locations, field)


@dataclass
class RequestBody:
    """A request body definition."""

    content: dict[str, MediaType] = field(default_factory=dict)
    required: bool = False
    content_location: Location = field(default_factory=Location)


@dataclass
class Response:
    """A response definition."""

    content: dict[str, MediaType] = field(default_factory=dict)
    content_location: Location = field(default_factory=Location)


@dataclass
class Responses:
    """Responses keyed by status code, with an optional default."""

    codes: dict[str, Response] = field(default_factory=dict)
    default: Response | None = None


@dataclass
class Operation:
    """An operation on a path. Location keys: "responses"."""

    summary: str = ""
    parameters: list[Parameter] = field(default_factory=list)
    security: list[dict[str, list[str]]] = field(default_factory=list)
    request_body: RequestBody | None = None
    responses: Responses | None = None
    locations: dict[str, Location] = field(default_factory=dict)

    def location(self, field: str) -> Location:
        """Return where the named field sits in the specification."""
        return _lookup_location(self.locations, field)


@dataclass
class PathItem:
    """The operations and shared parameters of one path."""

    get: Operation | None = None
    post: Operation | None = None
    put: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    parameters: list[Parameter] = field(default_factory=list)
    key_location: Location = field(default_factory=Location)


def _header_lookup(headers: dict[str, str], name: str) -> str:
    wanted = name.lower()
    return next((value for key, value in headers.items() if key.lower() == wanted), "")


@dataclass
class Request:
    """An incoming HTTP request."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    def header(self, name: str) -> str:
        """Case-insensitive header value, or an empty string."""
        return _header_lookup(self.headers, name)


@dataclass
class HttpResponse:
    """An outgoing HTTP response."""

    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def header(self, name: str) -> str:
        """Case-insensitive header value, or an empty string."""
        return _header_lookup(self.headers, name)