"""Custom exceptions for content adapters with HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    ADAPTER_ERROR = "ADAPTER_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_MISSING = "CONFIG_MISSING"
    UNKNOWN_ADAPTER = "UNKNOWN_ADAPTER"
    INVALID_ADAPTER = "INVALID_ADAPTER"

    # Template errors
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    TEMPLATE_RENDER_ERROR = "TEMPLATE_RENDER_ERROR"

    # XML errors
    XML_CONVERSION_ERROR = "XML_CONVERSION_ERROR"


class AdapterException(Exception):
    """Base exception for adapter errors with HTTP status code support.

    All custom exceptions inherit from this class so that error handlers can
    map them to a response status.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ADAPTER_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize adapter exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class AdapterConfigurationException(AdapterException, TypeError):
    """A required option is missing or has the wrong type."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, status_code=500, details=details)


class UnknownAdapterException(AdapterConfigurationException):
    """No adapter is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(
            f"No adapter registered under the name {name!r}",
            code=ErrorCode.UNKNOWN_ADAPTER,
            details={"adapter": name},
        )


class TemplateNotFoundException(AdapterException):
    """Neither a candidate path nor the default view could be read."""

    def __init__(self, message: str = "Template not found", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.TEMPLATE_NOT_FOUND,
            status_code=404,
            details=details,
        )


class TemplateRenderException(AdapterException):
    """The template engine failed to render a template."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.TEMPLATE_RENDER_ERROR,
            status_code=500,
            details=details,
        )


class XMLConversionException(AdapterException):
    """Data could not be converted into an XML document."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.XML_CONVERSION_ERROR,
            status_code=500,
            details=details,
        )
