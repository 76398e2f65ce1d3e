"""Error taxonomy for request views."""


class RequestViewError(Exception):
    """Base class for every error raised while building or reading a request view."""


class UnsupportedMethodError(RequestViewError, ValueError):
    """The transport reported a method outside the supported set."""

    def __init__(self, method: str) -> None:
        super().__init__(f"Unsupported HTTP method: {method!r}")
        self.method = method


class BodyReadError(RequestViewError, OSError):
    """The request body could not be drained from the transport."""


class IllegalStateError(RequestViewError):
    """An accessor was used in a state that does not support it."""


class MalformedJsonError(RequestViewError, ValueError):
    """The request body is not valid JSON."""
