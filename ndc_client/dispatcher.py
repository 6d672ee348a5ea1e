"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Request dispatch shared by every connector operation.

A call resolves the endpoint URL, builds and decorates the request, makes
exactly one exchange through the configured adapter, decodes the body and
hands it to the response classifier. The first failure ends the call; it is
recorded on the call's span once and then raised unchanged.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Tuple

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import Span, SpanKind
from pydantic import BaseModel, ValidationError

from ndc_client.adapters.base import ConnectorRequest, ConnectorResponse
from ndc_client.classifier import classify_response
from ndc_client.configuration import Configuration
from ndc_client.exceptions import (
    ConnectorError,
    InvalidRequestError,
    NdcClientError,
    ResponseNotJSONError,
)
from ndc_client.logging_config import get_logger, trace_log_fields
from ndc_client.operations import Operation, ResponseT
from ndc_client.tracing import inject_trace_context, traced_errors, with_traced_errors
from ndc_client.urls import append_path

logger = get_logger(__name__)

USER_AGENT_HEADER = "User-Agent"


def merge_headers(*sources: Mapping[str, str]) -> Dict[str, str]:
    """
    Merge header mappings left to right.

    Names compare case-insensitively and a later source wins on collision,
    keeping the later spelling of the name.
    """
    merged: Dict[str, Tuple[str, str]] = {}
    for source in sources:
        for name, value in source.items():
            merged[name.lower()] = (name, value)
    return {name: value for name, value in merged.values()}


def serialize_payload(operation: Operation, payload: Any) -> Optional[Any]:
    """
    Produce the JSON body for ``operation``.

    Declared fields left as None are omitted; unknown keys are sent as given.

    Raises:
        InvalidRequestError: If a payload is given to an operation without a
            body, is missing for one with a body, or does not match the
            request model
    """
    if not operation.has_body:
        if payload is not None:
            raise InvalidRequestError(f"{operation.name} does not take a request body")
        return None

    if payload is None:
        raise InvalidRequestError(f"{operation.name} requires a {operation.request_model.__name__}")

    if not isinstance(payload, BaseModel):
        try:
            payload = operation.request_model.model_validate(payload)
        except ValidationError as e:
            raise InvalidRequestError(
                f"{operation.name} payload does not match "
                f"{operation.request_model.__name__}: {e}"
            ) from e
    return payload.model_dump(mode="json")


def build_request(
    configuration: Configuration,
    operation: Operation,
    url: str,
    body: Optional[Any] = None,
    trace_headers: Optional[Mapping[str, str]] = None,
) -> ConnectorRequest:
    """Build the outgoing request: trace headers, then User-Agent, then static headers."""
    user_agent = {USER_AGENT_HEADER: configuration.user_agent} if configuration.user_agent else {}
    headers = merge_headers(trace_headers or {}, user_agent, configuration.headers)
    return ConnectorRequest(method=operation.method, url=url, headers=headers, body=body)


def decode_json(response: ConnectorResponse) -> Any:
    """Decode the response body as JSON."""
    try:
        return json.loads(response.content)
    except ValueError as e:
        raise ResponseNotJSONError(
            f"response body for status {response.status_code} is not valid JSON: {e}",
            status_code=response.status_code,
        ) from e


async def _execute(
    configuration: Configuration,
    operation: Operation[ResponseT],
    payload: Any,
    trace_context: Optional[Context],
    span: Optional[Span],
) -> ResponseT:
    log = logger.bind(operation=operation.name, **trace_log_fields(span))

    with traced_errors(span):
        url = append_path(configuration.base_path, operation.path)
        body = serialize_payload(operation, payload)

    request = build_request(
        configuration,
        operation,
        url,
        body=body,
        trace_headers=inject_trace_context(trace_context, configuration.propagator),
    )
    if span is not None:
        span.set_attribute("http.request.method", request.method)
        span.set_attribute("url.full", request.url)

    log.debug("connector_request", method=request.method, url=request.url)
    response = await with_traced_errors(configuration.adapter.send(request), span)

    if span is not None:
        span.set_attribute("http.response.status_code", response.status_code)
    log.debug(
        "connector_response",
        status_code=response.status_code,
        elapsed_ms=response.elapsed_ms,
    )

    with traced_errors(span):
        content = decode_json(response)
        return classify_response(response.status_code, content, operation.response_model)


async def dispatch(
    configuration: Configuration,
    operation: Operation[ResponseT],
    payload: Any = None,
    context: Optional[Context] = None,
) -> ResponseT:
    """
    Execute ``operation`` against the configured connector.

    Args:
        configuration: Client configuration
        operation: Operation to run
        payload: Request model (or a dict matching it) for POST operations
        context: Caller's OpenTelemetry context. When given, the call runs
            in a client span that is a child of it and the span's context
            is propagated to the connector. When None, nothing is traced.

    Returns:
        The decoded success response of the operation

    Raises:
        EndpointResolutionError: If the endpoint URL cannot be built; no
            request is sent
        InvalidRequestError: If the payload does not fit the operation; no
            request is sent
        TransportError: If the exchange fails
        BodyDecodeError: If the body is not JSON or does not match its schema
        ConnectorError: If the connector returned an error envelope
    """
    span: Optional[Span] = None
    if context is not None:
        span = configuration.get_tracer().start_span(
            operation.name, context=context, kind=SpanKind.CLIENT
        )
        context = trace.set_span_in_context(span, context)

    try:
        return await _execute(configuration, operation, payload, context, span)
    except ConnectorError as e:
        logger.warning(
            "connector_error_response",
            operation=operation.name,
            status_code=e.status_code,
            message=e.error_response.message,
        )
        raise
    except NdcClientError as e:
        logger.error(
            "connector_call_failed",
            operation=operation.name,
            error_type=type(e).__name__,
            error=str(e),
        )
        raise
    finally:
        if span is not None:
            span.end()
