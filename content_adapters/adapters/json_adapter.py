"""Baseline adapter that wraps response data in a success/error envelope."""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from content_adapters.config import Settings, get_settings
from content_adapters.exceptions import AdapterConfigurationException
from content_adapters.logging_config import get_logger, log_with_context
from content_adapters.models.envelope import describe_error, error_envelope, error_status, success_envelope
from content_adapters.utils.callbacks import Callback, deliver

logger = get_logger(__name__)

Formatter = Callable[[Any, dict[str, Any]], Any]

JSONP_CALLBACK_PATTERN = re.compile(r"^[A-Za-z_$][\w$.]*$")

# Options that only apply to rendering the success payload
RENDER_ONLY_OPTIONS = frozenset({"viewname", "resolve_filepath", "format_render", "engine"})


def pick_formatter(*candidates: Any) -> Formatter | None:
    for candidate in candidates:
        if callable(candidate):
            return candidate
    return None


class JSONAdapter:
    """Wraps response data in an object with a status code and result message.

    Formatting is configurable for both success and error responses through
    ``format_render`` and ``format_error`` callables, set on the instance or
    passed per call. A per-call formatter wins over the instance one.
    """

    media_type = "application/json"
    supports_jsonp = True

    def __init__(
        self,
        format_render: Formatter | None = None,
        format_error: Formatter | None = None,
        settings: Settings | None = None,
        **options: Any,
    ):
        self.format_render = format_render
        self.format_error = format_error
        self.settings = settings or get_settings()

    # Synchronous formatting

    def format_success(self, data: Any, **options: Any) -> Any:
        """Format a success payload synchronously."""
        formatter = pick_formatter(options.get("format_render"), self.format_render)
        if formatter is not None:
            return formatter(data, options)
        return self._default_success(data, **options)

    def format_failure(self, err: Any, **options: Any) -> Any:
        """Format an error payload synchronously."""
        formatter = pick_formatter(options.get("format_error"), self.format_error)
        if formatter is not None:
            return formatter(err, options)
        return self._default_failure(err, **options)

    def _default_success(self, data: Any, **options: Any) -> Any:
        return success_envelope(data)

    def _default_failure(self, err: Any, **options: Any) -> Any:
        return error_envelope(describe_error(err), status=error_status(err))

    # Asynchronous interface

    async def _render_payload(self, data: Any, **options: Any) -> Any:
        return self.format_success(data, **options)

    async def _error_payload(self, err: Any, **options: Any) -> Any:
        return self.format_failure(err, **options)

    async def render(self, data: Any, *, callback: Callback | None = None, **options: Any) -> Any:
        """Create a formatted success response.

        Args:
            data: Any data that should be sent with the success response
            callback: Optional ``callback(exc, result)``; errors are passed to it instead of raised
            **options: Per-call formatting options

        Returns:
            The formatted payload
        """
        return await deliver(self._render_payload(data, **options), callback)

    async def error(self, err: Any, *, callback: Callback | None = None, **options: Any) -> Any:
        """Create a formatted error response.

        Args:
            err: Any data to be sent as part of the error response
            callback: Optional ``callback(exc, result)``; errors are passed to it instead of raised
            **options: Per-call formatting options

        Returns:
            The formatted payload
        """
        return await deliver(self._error_payload(err, **options), callback)

    # Framework integration

    async def to_response(
        self,
        data: Any,
        request: Request | None = None,
        *,
        skip_response: bool = False,
        **options: Any,
    ) -> Response | Any:
        """Render ``data`` into a framework response.

        A failure while formatting the success payload is answered with an
        error response instead. With ``skip_response`` the payload itself is
        returned.
        """
        try:
            payload = await self._render_payload(data, **options)
        except Exception as e:
            log_with_context(
                logger,
                "warning",
                "Render failed, sending error response",
                adapter=type(self).__name__,
                error=str(e),
                error_type=type(e).__name__,
                event_type="adapter_render_error",
            )
            error_options = {key: value for key, value in options.items() if key not in RENDER_ONLY_OPTIONS}
            return await self.error_response(e, request, skip_response=skip_response, **error_options)

        if skip_response:
            return payload
        return self.build_response(payload, 200, request)

    async def error_response(
        self,
        err: Any,
        request: Request | None = None,
        *,
        skip_response: bool = False,
        **options: Any,
    ) -> Response | Any:
        """Render ``err`` into a framework error response."""
        payload = await self._error_payload(err, **options)
        if skip_response:
            return payload
        return self.build_response(payload, error_status(err), request)

    def build_response(self, payload: Any, status_code: int, request: Request | None = None) -> Response:
        """Wrap a formatted payload in a response, answering JSONP when the request asks for it."""
        jsonp_callback = request.query_params.get("callback") if request is not None else None
        if jsonp_callback and self.supports_jsonp:
            if not JSONP_CALLBACK_PATTERN.match(jsonp_callback):
                log_with_context(
                    logger,
                    "warning",
                    "Rejected JSONP callback name",
                    callback=jsonp_callback,
                    event_type="jsonp_invalid_callback",
                )
                invalid = AdapterConfigurationException(
                    "Invalid JSONP callback name",
                    details={"callback": jsonp_callback},
                )
                return JSONResponse(content=error_envelope(describe_error(invalid), status=400), status_code=400)
            body = json.dumps(jsonable_encoder(payload))
            return Response(
                content=f"/**/ typeof {jsonp_callback} === 'function' && {jsonp_callback}({body});",
                status_code=status_code,
                media_type="application/javascript",
            )
        if isinstance(payload, (str, bytes)):
            return Response(content=payload, status_code=status_code, media_type=self.media_type)
        return JSONResponse(content=jsonable_encoder(payload), status_code=status_code)

