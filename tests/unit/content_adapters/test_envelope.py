"""Tests for response envelopes."""

import pytest
from pydantic import ValidationError

from content_adapters.exceptions import TemplateNotFoundException
from content_adapters.models.envelope import (
    Envelope,
    describe_error,
    error_envelope,
    error_message,
    error_status,
    success_envelope,
)


def test_success_envelope():
    """Success envelope wraps data with status 200."""
    assert success_envelope({"foo": "bar"}) == {"result": "success", "status": 200, "data": {"foo": "bar"}}


def test_error_envelope():
    """Error envelope nests the error under data."""
    assert error_envelope("boom") == {"result": "error", "status": 500, "data": {"error": "boom"}}


def test_envelope_model_rejects_unknown_result():
    """Only success and error are valid results."""
    with pytest.raises(ValidationError):
        Envelope(result="maybe", status=200)


class TestErrorMessage:
    """Tests for error_message."""

    def test_exception_uses_str(self):
        assert error_message(ValueError("Some Random Error")) == "Some Random Error"

    def test_message_attribute_wins(self):
        assert error_message(TemplateNotFoundException("missing")) == "missing"

    def test_mapping_with_message(self):
        assert error_message({"message": "Some Random Error", "code": 1}) == "Some Random Error"

    def test_other_values_unchanged(self):
        assert error_message({"foo": "bar"}) == {"foo": "bar"}
        assert error_message("plain") == "plain"
        assert error_message(None) is None


class TestDescribeError:
    """Tests for describe_error."""

    def test_plain_exception(self):
        assert describe_error(RuntimeError("boom")) == {"message": "boom", "type": "RuntimeError"}

    def test_adapter_exception_keeps_code_and_details(self):
        described = describe_error(TemplateNotFoundException("missing", details={"filename": "x.html"}))

        assert described == {
            "message": "missing",
            "type": "TemplateNotFoundException",
            "code": "TEMPLATE_NOT_FOUND",
            "details": {"filename": "x.html"},
        }

    def test_non_exception_unchanged(self):
        assert describe_error({"foo": "bar"}) == {"foo": "bar"}


def test_error_status():
    """Status codes come from the exception when it carries one."""
    assert error_status(TemplateNotFoundException()) == 404
    assert error_status(ValueError("x")) == 500
    assert error_status("x", default=418) == 418
