"""Router that hands handlers a RequestView and converts their results."""

import inspect
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any

import orjson
from pydantic import BaseModel
from robyn import Request, Response, SubRouter, status_codes

from reqview.core.exceptions import (
    BodyReadError,
    IllegalStateError,
    MalformedJsonError,
    RequestViewError,
    UnsupportedMethodError,
)
from reqview.core.exchange import WireExchange
from reqview.core.logger import LogIcon, logger
from reqview.core.request import RequestView
from reqview.models.core import HttpMethod
from reqview.models.route import RouteConfig

ViewHandler = Callable[[RequestView], Awaitable[Any]]

ERROR_STATUS: dict[type[RequestViewError], tuple[int, str]] = {
    UnsupportedMethodError: (405, "unsupported_method"),
    BodyReadError: (400, "body_read_error"),
    MalformedJsonError: (status_codes.HTTP_422_UNPROCESSABLE_ENTITY, "malformed_json"),
    IllegalStateError: (500, "illegal_state"),
}


def build_request_view(route_config: RouteConfig, request: Request) -> RequestView:
    """Wrap a Robyn request in a RequestView for the given route."""
    return RequestView(route_config, WireExchange.from_robyn(request))


def error_response(ex: RequestViewError) -> Response:
    """Convert a request view error to a JSON error response."""
    status, code = next(
        (value for cls, value in ERROR_STATUS.items() if isinstance(ex, cls)),
        (500, "request_error"),
    )
    return Response(
        status_code=status,
        headers={"content-type": "application/json"},
        description=orjson.dumps({"error": code, "detail": str(ex)}).decode(),
    )


def parse_response(result: Any) -> Response:
    """Convert handler result to Response."""
    match result:
        case Response():
            return result
        case BaseModel():
            return Response(
                status_code=status_codes.HTTP_200_OK,
                headers={"content-type": "application/json"},
                description=result.model_dump_json(indent=4),
            )
        case dict():
            return Response(
                status_code=status_codes.HTTP_200_OK,
                headers={"content-type": "application/json"},
                description=orjson.dumps(result).decode(),
            )
        case _:
            return Response(
                status_code=status_codes.HTTP_200_OK,
                headers={},
                description=str(result),
            )


async def dispatch(handler: ViewHandler, route_config: RouteConfig, request: Request) -> Response:
    """Build the view, run the handler and map request view errors to responses."""
    try:
        view = build_request_view(route_config, request)
        result = await handler(view)
    except RequestViewError as ex:
        logger.warning(
            f"Request failed: {type(ex).__name__}",
            icon=LogIcon.ERROR,
            route=route_config.template,
            detail=str(ex),
        )
        return error_response(ex)
    return parse_response(result)


def _create_method_wrapper(original_method: Callable, router_prefix: str = "") -> Callable:
    @wraps(original_method)
    def method_wrapper(*args, **kwargs) -> Callable:
        endpoint = args[0] if args else kwargs.get("endpoint", "")
        decorator = original_method(*args, **kwargs)
        route_config = RouteConfig.from_template(f"{router_prefix}{endpoint}".replace("//", "/"))

        def handler_decorator(handler: ViewHandler) -> Callable:
            @wraps(handler)
            async def wrapped_handler(request: Request):
                return await dispatch(handler, route_config, request)

            # Robyn injects by signature, so expose only the raw request
            wrapped_handler.__signature__ = inspect.Signature(  # type: ignore[attr-defined]
                [inspect.Parameter("request", inspect.Parameter.POSITIONAL_OR_KEYWORD, annotation=Request)]
            )
            wrapped_handler.route_config = route_config  # type: ignore[attr-defined]
            logger.info("Registered route", icon=LogIcon.ROUTE, route=route_config.template)
            return decorator(wrapped_handler)

        return handler_decorator

    return method_wrapper


class Router(SubRouter):
    """SubRouter whose handlers receive a RequestView instead of a raw request."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._prefix = kwargs.get("prefix", "")
        self._wrap_methods()

    def _wrap_methods(self) -> None:
        """Wrap HTTP methods with view construction."""
        for method in HttpMethod:
            method_name = method.value.lower()
            if hasattr(self, method_name):
                original_method = getattr(self, method_name)
                wrapped_method = _create_method_wrapper(original_method, self._prefix)
                setattr(self, method_name, wrapped_method)
