"""Exception handling for xbs-pudo."""

from __future__ import annotations

import logging
from typing import Any

from litestar import Request, Response
from litestar.exceptions import HTTPException

logger = logging.getLogger(__name__)


class PudoError(Exception):
    """Base class for errors raised by the PUDO service."""

    code = "pudo_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(PudoError):
    """Client input is missing or invalid."""

    code = "invalid_request"


class ConfigurationError(PudoError):
    """A required setting or component is not configured."""

    code = "configuration_error"


class AggregatorError(PudoError):
    """The shipping aggregator failed or reported an error level."""

    code = "aggregator_error"

    def __init__(
        self,
        message: str,
        *,
        error_level: int | None = None,
        status_code: int | None = None,
        response: Any = None,
    ) -> None:
        self.error_level = error_level
        self.status_code = status_code
        self.response = response
        super().__init__(message)


class OrderNotFoundError(PudoError):
    """Order with given number was not found on the order platform."""

    code = "order_not_found"

    def __init__(self, order_number: str) -> None:
        self.order_number = order_number
        super().__init__(f"Order {order_number!r} not found")


class OrderPlatformError(PudoError):
    """The order platform could not be reached or is not configured."""

    code = "order_platform_error"


def _error_response(
    detail: str, code: str, status_code: int, **extra: Any
) -> Response:
    return Response(
        content={"success": False, "error": detail, "code": code, **extra},
        status_code=status_code,
    )


def handle_invalid_request(
    request: Request, exc: InvalidRequestError
) -> Response:
    """Map InvalidRequestError to 400."""
    return _error_response(exc.message, exc.code, 400)


def handle_order_not_found(
    request: Request, exc: OrderNotFoundError
) -> Response:
    """Map OrderNotFoundError to 404."""
    return _error_response(exc.message, exc.code, 404)


def handle_aggregator_error(
    request: Request, exc: AggregatorError
) -> Response:
    """Map AggregatorError to 502."""
    logger.error("Aggregator error on %s: %s", request.url.path, exc.message)
    extra = {}
    if exc.error_level is not None:
        extra["errorLevel"] = exc.error_level
    return _error_response(exc.message, exc.code, 502, **extra)


def handle_order_platform_error(
    request: Request, exc: OrderPlatformError
) -> Response:
    """Map OrderPlatformError to 502."""
    logger.error("Order platform error on %s: %s", request.url.path, exc)
    return _error_response(exc.message, exc.code, 502)


def handle_configuration_error(
    request: Request, exc: ConfigurationError
) -> Response:
    """Map ConfigurationError to 500."""
    return _error_response(exc.message, exc.code, 500)


def handle_pudo_error(request: Request, exc: PudoError) -> Response:
    """Map any other PudoError to 400."""
    return _error_response(exc.message, exc.code, 400)


def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    """Keep framework status codes but use the service's error shape."""
    extra = {"details": exc.extra} if exc.extra else {}
    return _error_response(
        str(exc.detail), "http_error", exc.status_code, **extra
    )


def handle_unexpected_error(request: Request, exc: Exception) -> Response:
    """Map anything unhandled to 500 with a generic message."""
    logger.exception("Unhandled error on %s", request.url.path)
    return _error_response("Internal server error", "internal_error", 500)


EXCEPTION_HANDLERS = {
    InvalidRequestError: handle_invalid_request,
    OrderNotFoundError: handle_order_not_found,
    AggregatorError: handle_aggregator_error,
    OrderPlatformError: handle_order_platform_error,
    ConfigurationError: handle_configuration_error,
    PudoError: handle_pudo_error,
    HTTPException: handle_http_exception,
    Exception: handle_unexpected_error,
}
