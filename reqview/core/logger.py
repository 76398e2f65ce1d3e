import logging
from dataclasses import dataclass, field
from enum import StrEnum

import orjson
import structlog
from asgi_correlation_id import correlation_id
from beartype import beartype

from reqview.core.settings import settings

REDACTED = "[redacted]"
SENSITIVE_HEADERS = frozenset({"cookie", "set-cookie", "authorization", "proxy-authorization"})


class LoggerError(Exception):
    """Exception for logger related issues."""


class LogLevel(StrEnum):
    """LogLevel types for logger configuration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    NOTSET = "NOTSET"


class LogIcon(StrEnum):
    """Icon mappings for different log categories."""

    DEFAULT = "📋"
    ERROR = "❌"
    START = "🚀"
    DETECTION = "🔍"
    NETWORK = "🌐"
    ROUTE = "🧭"
    HEALTHCHECK = "❤️"
    JSON = "📝"
    FORBIDDEN = "🚫"


@dataclass
class LoggerConfig:
    """Logger configuration with debug-specific settings."""
    debug: bool = field(default_factory=lambda: settings.DEBUG)
    log_level: LogLevel = field(default_factory=lambda: LogLevel(settings.LOG_LEVEL))


def add_correlation_id(logger, method_name: str, event_dict: dict) -> dict:
    """Add correlation_id to event_dict if present in context."""
    request_id = correlation_id.get()
    if request_id:
        event_dict["correlation_id"] = request_id
    return event_dict


def redact_headers(logger, method_name: str, event_dict: dict) -> dict:
    """Mask credential-bearing headers, both as direct kwargs and inside a ``headers`` mapping."""
    for key in event_dict:
        if key.lower() in SENSITIVE_HEADERS:
            event_dict[key] = REDACTED

    headers = event_dict.get("headers")
    if isinstance(headers, dict):
        event_dict["headers"] = {
            name: REDACTED if name.lower() in SENSITIVE_HEADERS else value for name, value in headers.items()
        }
    return event_dict


class BusinessRulesProcessor:
    """
    Apply business rules to log events.

    - Event messages are upper-cased and cut to 80 characters.
    - The ``icon`` kwarg must be a LogIcon member; it prefixes the event in debug mode only.
    """

    def __init__(self, debug: bool) -> None:
        self.debug = debug

    @beartype
    def __call__(self, logger, name: str, event_dict: dict) -> dict:
        try:
            event = str(event_dict.get("event", ""))[:80].upper()
            icon_enum = LogIcon(event_dict.pop("icon", LogIcon.DEFAULT))
        except ValueError as err:
            raise LoggerError("Wrong Icon chosen, please choose a valid LogIcon enum member") from err

        event_dict["event"] = f"{icon_enum.value} {event}" if self.debug else event
        return event_dict


def dev_pipeline_renderer(logger, name: str, event_dict: dict) -> str:
    """Render log events as pipe-separated fields."""
    reserved_keys = {"timestamp", "level", "event", "filename", "lineno"}

    location = f"{event_dict['filename']}:{event_dict.get('lineno', '')}" if event_dict.get("filename") else ""
    extra_kwargs = " | ".join(f"{k}={v}" for k, v in event_dict.items() if k not in reserved_keys)

    parts = [
        event_dict.get("timestamp", ""),
        event_dict.get("level", LogLevel.INFO.value).upper(),
        event_dict.get("event", ""),
        extra_kwargs,
        location,
    ]
    return " | ".join(filter(None, parts))


def build_processors(config: LoggerConfig) -> list:
    """Processor chain: redaction and business rules first, then the dev or JSON renderer."""
    shared = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
            additional_ignores=["logger"]
        ),
        redact_headers,
        BusinessRulesProcessor(debug=config.debug),
    ]

    if config.debug:
        return shared + [dev_pipeline_renderer]
    return shared + [
        add_correlation_id,
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(serializer=orjson.dumps),
    ]


def setup_logging(config: LoggerConfig) -> None:
    """Configure structlog for the given config."""
    structlog.configure(
        processors=build_processors(config),
        # orjson renders bytes
        logger_factory=structlog.PrintLoggerFactory() if config.debug else structlog.BytesLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, config.log_level.value)),
        cache_logger_on_first_use=True,
    )


setup_logging(LoggerConfig())

logger = structlog.get_logger()
