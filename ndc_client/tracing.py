"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Trace context propagation and error recording.

The client never reads the process-wide "current span". Callers pass an
OpenTelemetry ``Context`` into each call; without one the call is simply
not traced.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Awaitable, Dict, Iterator, Optional, TypeVar

from opentelemetry import propagate
from opentelemetry.context import Context
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.trace import Span, Status, StatusCode

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


def inject_trace_context(
    context: Optional[Context],
    propagator: Optional[TextMapPropagator] = None,
) -> Dict[str, str]:
    """
    Serialize a tracing context into HTTP headers.

    Args:
        context: Caller's tracing context. ``None`` means "not traced".
        propagator: Propagator to use; defaults to the global text-map
            propagator configured for OpenTelemetry.

    Returns:
        Header name to value mapping, empty when there is nothing to propagate
    """
    if context is None:
        return {}

    if propagator is None:
        propagator = propagate.get_global_textmap()

    carrier: Dict[str, str] = {}
    propagator.inject(carrier, context=context)
    return carrier


def record_error(error: E, span: Optional[Span]) -> E:
    """
    Mark ``span`` as failed with the description of ``error``.

    Returns ``error`` itself so callers can write ``raise record_error(e, span)``.
    No-op when ``span`` is None or not recording.
    """
    if span is not None and span.is_recording():
        span.set_status(Status(StatusCode.ERROR, description=str(error)))
    return error


@contextmanager
def traced_errors(span: Optional[Span]) -> Iterator[None]:
    """Record any exception raised in the block on ``span`` and re-raise it."""
    try:
        yield
    except BaseException as e:
        record_error(e, span)
        raise


async def with_traced_errors(awaitable: Awaitable[T], span: Optional[Span]) -> T:
    """Await ``awaitable``, recording a failure on ``span`` before it propagates."""
    with traced_errors(span):
        return await awaitable
