"""Core value objects for request inspection."""

from enum import StrEnum

from beartype import beartype
from pydantic import BaseModel, ConfigDict

from reqview.core.exceptions import UnsupportedMethodError

JSON_MIME_TYPE = "application/json"


def split_segments(text: str, separator: str) -> list[str]:
    """Split text on separator, dropping trailing empty pieces.

    ``"/users/42/"`` gives ``["", "users", "42"]`` and ``"a="`` gives ``["a"]``.
    """
    parts = text.split(separator)
    while parts and not parts[-1]:
        parts.pop()
    return parts


class HttpMethod(StrEnum):
    """Closed set of HTTP methods a request view accepts."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    @property
    def has_request_body(self) -> bool:
        return self in _BODY_METHODS

    @classmethod
    def parse(cls, token: str) -> "HttpMethod":
        """Map a raw method token onto the enum. Matching is case-sensitive."""
        try:
            return cls(token)
        except ValueError:
            raise UnsupportedMethodError(token) from None


_BODY_METHODS = frozenset({HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH})


class Header(BaseModel):
    """A single header line. Repeated names produce repeated headers."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class QueryParam(BaseModel):
    """A raw, undecoded query string pair."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str


class Cookie(BaseModel):
    """A cookie sent by the client."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


@beartype
def parse_cookie_header(value: str) -> list[Cookie]:
    """Parse one ``Cookie`` header value into its cookies, in order.

    Pairs without ``=`` or with an empty name are skipped.
    """
    cookies: list[Cookie] = []
    for pair in value.split(";"):
        name, sep, raw = pair.strip().partition("=")
        name = name.strip()
        if not sep or not name:
            continue
        cookies.append(Cookie(name=name, value=_unquote(raw.strip())))
    return cookies


class ContentType(BaseModel):
    """Parsed ``Content-Type`` header value."""

    model_config = ConfigDict(frozen=True)

    mime_type: str
    parameters: dict[str, str] = {}

    @classmethod
    @beartype
    def parse(cls, value: str) -> "ContentType":
        mime_type, *params = value.split(";")
        parameters: dict[str, str] = {}
        for param in params:
            key, sep, raw = param.partition("=")
            key = key.strip().lower()
            if sep and key:
                parameters[key] = _unquote(raw.strip())
        return cls(mime_type=mime_type.strip().lower(), parameters=parameters)

    @property
    def charset(self) -> str | None:
        return self.parameters.get("charset")

    @property
    def boundary(self) -> str | None:
        return self.parameters.get("boundary")

    @property
    def is_json(self) -> bool:
        return self.mime_type == JSON_MIME_TYPE or self.mime_type.endswith("+json")

    def __str__(self) -> str:
        params = "".join(f"; {k}={v}" for k, v in self.parameters.items())
        return f"{self.mime_type}{params}"
