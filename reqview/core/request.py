"""Typed, query-able view over one inbound HTTP exchange."""

import ipaddress
from typing import Any
from urllib.parse import urlsplit

import orjson

from reqview.core.attributes import Attributes
from reqview.core.exceptions import BodyReadError, IllegalStateError, MalformedJsonError, UnsupportedMethodError
from reqview.core.exchange import Exchange
from reqview.core.logger import LogIcon, logger
from reqview.core.settings import settings as st
from reqview.models.core import (
    ContentType,
    Cookie,
    Header,
    HttpMethod,
    QueryParam,
    parse_cookie_header,
    split_segments,
)
from reqview.models.route import RouteConfig

CONTENT_TYPE_HEADER = "Content-Type"
COOKIE_HEADER = "Cookie"


def _require_name(name: str | None, what: str) -> None:
    if name is None:
        raise IllegalStateError(f"{what} must not be None")


def host_from_netloc(netloc: str) -> str | None:
    """Strip userinfo and port from a URI authority without changing case."""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        host = host[: host.find("]") + 1] if "]" in host else host
    else:
        host = host.partition(":")[0]
    return host or None


def parse_query_string(query: str) -> list[QueryParam]:
    """Split a raw query string into params without percent-decoding.

    Tokens that do not split into exactly a key and a value are dropped.
    """
    params: list[QueryParam] = []
    for token in split_segments(query, "&"):
        parts = split_segments(token, "=")
        if len(parts) != 2:
            continue
        params.append(QueryParam(key=parts[0], value=parts[1]))
    return params


class RequestView:
    """Read-only accessors over an exchange plus a request-scoped attribute bag.

    The method is resolved first and the body is drained second, only for
    methods that carry one. Either step failing aborts construction.
    Instances are single-owner and not thread safe.
    """

    __slots__ = ("_exchange", "_route_config", "_method", "_raw_body", "_attributes")

    def __init__(self, route_config: RouteConfig, exchange: Exchange) -> None:
        self._exchange = exchange
        self._route_config = route_config
        self._attributes = Attributes()

        try:
            self._method = HttpMethod.parse(exchange.request_method)
        except UnsupportedMethodError:
            logger.warning("Unsupported method", icon=LogIcon.FORBIDDEN, method=exchange.request_method)
            raise

        self._raw_body: bytes | None = None
        if self._method.has_request_body:
            try:
                self._raw_body = bytes(exchange.read_body())
            except OSError as ex:
                logger.warning("Body read failed", icon=LogIcon.ERROR, method=self._method, error=str(ex))
                raise BodyReadError(f"Failed to read request body: {ex}") from ex

        logger.debug(
            "Request view built",
            icon=LogIcon.NETWORK,
            method=self._method,
            uri=exchange.request_uri,
            headers=dict(exchange.request_headers),
        )

    def __repr__(self) -> str:
        return f"RequestView({self._method} {self._exchange.request_uri})"

    # -- Metadata --

    @property
    def method(self) -> HttpMethod:
        return self._method

    @property
    def path(self) -> str:
        return urlsplit(self._exchange.request_uri).path

    @property
    def host(self) -> str | None:
        """Host from the request URI as written, ``None`` for origin-form URIs.

        IPv6 literals keep their brackets.
        """
        return host_from_netloc(urlsplit(self._exchange.request_uri).netloc)

    @property
    def ip(self) -> str | None:
        """Textual IP of the remote peer, ``None`` when unknown."""
        remote = self._exchange.remote_address
        if not remote or not remote[0]:
            return None
        try:
            return str(ipaddress.ip_address(remote[0]))
        except ValueError:
            return None

    @property
    def route_config(self) -> RouteConfig:
        return self._route_config

    # -- Body --

    @property
    def raw_body(self) -> bytes:
        """Body bytes captured at construction.

        Raises IllegalStateError when the method does not carry a body.
        """
        if self._raw_body is None:
            raise IllegalStateError(f"No body available for {self._method} requests")
        return self._raw_body

    @property
    def body(self) -> str:
        return self.raw_body.decode(st.BODY_ENCODING, errors="replace")

    def json(self) -> Any:
        """Parse the body as JSON."""
        try:
            return orjson.loads(self.body)
        except orjson.JSONDecodeError as ex:
            raise MalformedJsonError(str(ex)) from ex

    # -- Headers --

    @property
    def headers(self) -> list[Header]:
        return [Header(name=name, value=value) for name, value in self._exchange.request_headers]

    def get_headers(self, name: str) -> list[Header]:
        """Headers whose name equals ``name`` exactly (case-sensitive)."""
        _require_name(name, "Header name")
        return [header for header in self.headers if header.name == name]

    def get_first_header(self, name: str) -> Header | None:
        return next(iter(self.get_headers(name)), None)

    @property
    def content_type(self) -> ContentType | None:
        header = self.get_first_header(CONTENT_TYPE_HEADER)
        if header is None:
            return None
        return ContentType.parse(header.value)

    # -- Query and path parameters --

    @property
    def query_params(self) -> list[QueryParam]:
        return parse_query_string(urlsplit(self._exchange.request_uri).query)

    def get_query_params(self, key: str) -> list[QueryParam]:
        _require_name(key, "Query key")
        return [param for param in self.query_params if param.key == key]

    def get_first_query_param(self, key: str) -> QueryParam | None:
        return next(iter(self.get_query_params(key)), None)

    def get_request_param(self, name: str) -> str | None:
        """Path segment bound to ``name`` by the route, ``None`` if absent or out of range."""
        _require_name(name, "Request param name")
        index = self._route_config.index_of(name)
        if index is None:
            return None
        segments = split_segments(self.path, "/")
        if index >= len(segments):
            return None
        return segments[index]

    # -- Cookies --

    @property
    def cookies(self) -> list[Cookie]:
        cookies: list[Cookie] = []
        for header in self.get_headers(COOKIE_HEADER):
            cookies.extend(parse_cookie_header(header.value))
        return cookies

    # -- Attributes --

    @property
    def attributes(self) -> Attributes:
        return self._attributes

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes.set(name, value)

    def has_attribute(self, name: str) -> bool:
        return self._attributes.has(name)

    def get_attribute(self, name: str) -> Any:
        return self._attributes.get(name)

    def remove_attribute(self, name: str) -> bool:
        return self._attributes.remove(name)
