"""Test fixtures for reqview unit tests."""

import io
from dataclasses import dataclass, field

import pytest

from reqview.core.exchange import WireExchange
from reqview.core.request import RequestView
from reqview.models.route import RouteConfig


# -----------------------------------------------------------------------------
# Mock classes for Robyn Request
# -----------------------------------------------------------------------------


@dataclass
class MockHeaders:
    """Mock Headers object for Robyn Request. Names are lower-cased like Robyn's."""

    _data: dict[str, list[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        data, self._data = self._data, {}
        for key, values in data.items():
            for value in values:
                self.append(key, value)

    def get(self, key: str, default: str | None = None) -> str | None:
        values = self._data.get(key.lower())
        return values[0] if values else default

    def append(self, key: str, value: str) -> None:
        self._data.setdefault(key.lower(), []).append(value)

    def get_headers(self) -> dict[str, list[str]]:
        return self._data


@dataclass
class MockQueryParams:
    """Mock QueryParams object for Robyn Request."""

    _data: dict[str, list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, list[str]]:
        return self._data


@dataclass
class MockUrl:
    """Mock Url object for Robyn Request."""

    scheme: str = "http"
    host: str = "localhost"
    path: str = "/"


@dataclass
class MockRequest:
    """Mock Request object for Robyn."""

    method: str = "GET"
    url: MockUrl = field(default_factory=MockUrl)
    headers: MockHeaders = field(default_factory=MockHeaders)
    query_params: MockQueryParams = field(default_factory=MockQueryParams)
    body: str | bytes = ""
    ip_addr: str | None = None


# -----------------------------------------------------------------------------
# Exchange and view factories
# -----------------------------------------------------------------------------


@pytest.fixture
def make_exchange():
    """Factory fixture to create in-memory exchanges."""

    def _make(
        method: str = "GET",
        uri: str = "/",
        headers: list[tuple[str, str]] | None = None,
        body: bytes = b"",
        remote: tuple[str, int] | None = None,
    ) -> WireExchange:
        return WireExchange(
            request_method=method,
            request_uri=uri,
            request_headers=headers or [],
            body_stream=io.BytesIO(body),
            remote_address=remote,
        )

    return _make


@pytest.fixture
def make_view(make_exchange):
    """Factory fixture to create request views over in-memory exchanges."""

    def _make(template: str = "/", **kwargs) -> RequestView:
        return RequestView(RouteConfig.from_template(template), make_exchange(**kwargs))

    return _make


@pytest.fixture
def make_mock_request():
    """Factory fixture to create mock Robyn requests."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, list[str]] | None = None,
        query: dict[str, list[str]] | None = None,
        body: str | bytes = "",
        ip_addr: str | None = None,
    ) -> MockRequest:
        return MockRequest(
            method=method,
            url=MockUrl(path=path),
            headers=MockHeaders(_data=headers or {}),
            query_params=MockQueryParams(_data=query or {}),
            body=body,
            ip_addr=ip_addr,
        )

    return _make
