"""Transport-side view of one inbound HTTP exchange."""

import io
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import BinaryIO, Protocol
from urllib.parse import quote, urlencode, urlunsplit

from robyn import Request

from reqview.core.exceptions import IllegalStateError


def canonical_header_name(name: str) -> str:
    """Restore wire casing for a lower-cased header name, e.g. ``content-type`` to ``Content-Type``."""
    return "-".join(part[:1].upper() + part[1:] for part in name.split("-"))


class Exchange(Protocol):
    """What a request view needs from the transport layer."""

    request_method: str
    request_uri: str
    request_headers: Sequence[tuple[str, str]]
    remote_address: tuple[str, int] | None

    def read_body(self) -> bytes:
        """Drain the body stream. Blocking, and only valid once."""
        ...


@dataclass
class WireExchange:
    """In-memory exchange backed by a binary body stream."""

    request_method: str
    request_uri: str
    request_headers: list[tuple[str, str]] = field(default_factory=list)
    body_stream: BinaryIO = field(default_factory=io.BytesIO)
    remote_address: tuple[str, int] | None = None
    _drained: bool = field(default=False, init=False, repr=False)

    def read_body(self) -> bytes:
        if self._drained:
            raise IllegalStateError("Request body stream has already been consumed")
        self._drained = True
        return self.body_stream.read()

    @classmethod
    def from_robyn(cls, request: Request) -> "WireExchange":
        """Adapt a Robyn request into an exchange."""
        # Robyn groups query values by key, so cross-key order is not recoverable
        query = urlencode(
            [(key, value) for key, values in request.query_params.to_dict().items() for value in values],
            quote_via=quote,
        )
        uri = urlunsplit((request.url.scheme, request.url.host, request.url.path, query, ""))

        # Robyn lower-cases header names
        headers = [
            (canonical_header_name(name), value)
            for name, values in request.headers.get_headers().items()
            for value in values
        ]

        body = request.body or b""
        if isinstance(body, str):
            body = body.encode("utf-8")

        remote = (request.ip_addr, 0) if request.ip_addr else None

        return cls(
            request_method=request.method,
            request_uri=uri,
            request_headers=headers,
            body_stream=io.BytesIO(body),
            remote_address=remote,
        )
