"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Unit tests for trace context propagation and error recording.
"""

import pytest
from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import INVALID_SPAN, NonRecordingSpan, StatusCode

from ndc_client.exceptions import ConnectorError, TransportError
from ndc_client.models import ErrorResponse
from ndc_client.tracing import (
    inject_trace_context,
    record_error,
    traced_errors,
    with_traced_errors,
)


class TestInjectTraceContext:
    """Test inject_trace_context."""

    def test_no_context_gives_no_headers(self, propagator):
        assert inject_trace_context(None, propagator) == {}

    def test_no_context_without_propagator(self):
        assert inject_trace_context(None) == {}

    def test_empty_context_gives_no_headers(self, propagator):
        assert inject_trace_context(Context(), propagator) == {}

    def test_injects_traceparent_for_active_span(self, parent_span, propagator):
        ctx = trace.set_span_in_context(parent_span)
        headers = inject_trace_context(ctx, propagator)

        span_context = parent_span.get_span_context()
        assert headers["traceparent"] == (
            f"00-{span_context.trace_id:032x}-{span_context.span_id:016x}-01"
        )

    def test_uses_global_propagator_by_default(self, parent_span):
        ctx = trace.set_span_in_context(parent_span)
        headers = inject_trace_context(ctx)
        assert "traceparent" in headers


class TestRecordError:
    """Test record_error."""

    def test_marks_span_as_errored(self, tracer):
        span = tracer.start_span("call")
        error = TransportError("connection refused")

        record_error(error, span)

        assert span.status.status_code == StatusCode.ERROR
        assert span.status.description == "connection refused"
        span.end()

    def test_returns_the_same_error_unchanged(self, tracer):
        span = tracer.start_span("call")
        envelope = ErrorResponse(message="bad request", details={"field": "limit"})
        error = ConnectorError(status_code=400, error_response=envelope)

        returned = record_error(error, span)

        assert returned is error
        assert returned.status_code == 400
        assert returned.error_response is envelope
        span.end()

    def test_no_span_is_a_no_op(self):
        error = ValueError("boom")
        assert record_error(error, None) is error

    def test_non_recording_span_is_a_no_op(self):
        error = ValueError("boom")
        assert record_error(error, INVALID_SPAN) is error
        assert record_error(error, NonRecordingSpan(INVALID_SPAN.get_span_context())) is error


class TestTracedErrors:
    """Test the context manager and async helper."""

    def test_traced_errors_records_and_reraises(self, tracer):
        span = tracer.start_span("call")
        error = TransportError("timeout")

        with pytest.raises(TransportError) as exc_info:
            with traced_errors(span):
                raise error

        assert exc_info.value is error
        assert span.status.status_code == StatusCode.ERROR
        span.end()

    def test_traced_errors_leaves_success_untouched(self, tracer):
        span = tracer.start_span("call")
        with traced_errors(span):
            pass
        assert span.status.status_code == StatusCode.UNSET
        span.end()

    @pytest.mark.asyncio
    async def test_with_traced_errors_returns_result(self, tracer):
        async def succeed():
            return 42

        span = tracer.start_span("call")
        assert await with_traced_errors(succeed(), span) == 42
        assert span.status.status_code == StatusCode.UNSET
        span.end()

    @pytest.mark.asyncio
    async def test_with_traced_errors_records_async_failure(self, tracer):
        error = TransportError("reset by peer")

        async def fail():
            raise error

        span = tracer.start_span("call")
        with pytest.raises(TransportError) as exc_info:
            await with_traced_errors(fail(), span)

        assert exc_info.value is error
        assert span.status.description == "reset by peer"
        span.end()
