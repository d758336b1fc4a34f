"""Pydantic models for adapter payloads."""

from content_adapters.models.envelope import (
    Envelope,
    describe_error,
    error_envelope,
    error_message,
    error_status,
    success_envelope,
)

__all__ = [
    "Envelope",
    "describe_error",
    "error_envelope",
    "error_message",
    "error_status",
    "success_envelope",
]
