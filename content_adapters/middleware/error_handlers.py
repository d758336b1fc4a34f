"""Exception handlers that answer errors through a content adapter."""

from fastapi import FastAPI, Request
from fastapi.responses import Response

from content_adapters.exceptions import AdapterException, ErrorCode
from content_adapters.logging_config import get_logger, log_with_context
from content_adapters.adapters import JSONAdapter

logger = get_logger(__name__)


def register_error_handlers(app: FastAPI, adapter: JSONAdapter) -> None:
    """Register exception handlers that render errors with ``adapter``.

    Args:
        app: FastAPI application instance
        adapter: Adapter whose ``error_response`` builds the error body
    """

    async def adapter_exception_handler(request: Request, exc: AdapterException) -> Response:
        log_with_context(
            logger,
            "warning",
            "Adapter error",
            error_code=exc.code.value,
            error_message=exc.message,
            status_code=exc.status_code,
            method=request.method,
            url=str(request.url),
            event_type="adapter_error",
        )
        return await adapter.error_response(exc, request)

    async def general_exception_handler(request: Request, exc: Exception) -> Response:
        log_with_context(
            logger,
            "error",
            "Unhandled exception",
            error=str(exc),
            error_type=type(exc).__name__,
            method=request.method,
            url=str(request.url),
            event_type="unhandled_error",
        )
        logger.error("Exception traceback:", exc_info=exc)

        # Don't expose internal error details to clients
        internal = AdapterException("Internal server error", code=ErrorCode.INTERNAL_ERROR)
        return await adapter.error_response(internal, request)

    app.add_exception_handler(AdapterException, adapter_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
