"""Success and error envelopes shared by the JSON and XML adapters."""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel


class Envelope(BaseModel):
    """Wrapper returned to callers around response data."""

    result: Literal["success", "error"]
    status: int
    data: Any = None


def error_message(err: Any) -> Any:
    """Collapse an error to its message when it carries one.

    Exceptions and objects with a string ``message`` attribute or mapping key
    yield that message. Exceptions without one yield ``str(err)``. Anything
    else is returned unchanged.
    """
    message = getattr(err, "message", None)
    if isinstance(message, str):
        return message
    if isinstance(err, Mapping) and isinstance(err.get("message"), str):
        return err["message"]
    if isinstance(err, BaseException):
        return str(err)
    return err


def success_envelope(data: Any, status: int = 200) -> dict[str, Any]:
    return Envelope(result="success", status=status, data=data).model_dump()


def error_envelope(err: Any, status: int = 500) -> dict[str, Any]:
    return Envelope(result="error", status=status, data={"error": err}).model_dump()


def describe_error(err: Any) -> Any:
    """Turn an exception into a JSON-serializable mapping.

    Adapter exceptions keep their error code and details. Non-exception
    values are returned unchanged.
    """
    if not isinstance(err, BaseException):
        return err
    described: dict[str, Any] = {"message": error_message(err), "type": type(err).__name__}
    code = getattr(err, "code", None)
    if code is not None:
        described["code"] = getattr(code, "value", code)
    details = getattr(err, "details", None)
    if details:
        described["details"] = details
    return described


def error_status(err: Any, default: int = 500) -> int:
    """HTTP status carried by ``err``, or ``default``."""
    status = getattr(err, "status_code", None)
    return status if isinstance(status, int) else default
