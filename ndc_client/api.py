"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Connector operations as plain coroutine functions.

Each function makes exactly one HTTP exchange. See
:func:`ndc_client.dispatcher.dispatch` for the errors they raise.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from opentelemetry.context import Context

from ndc_client.configuration import Configuration
from ndc_client.dispatcher import dispatch
from ndc_client.models import (
    CapabilitiesResponse,
    ExplainResponse,
    MutationRequest,
    MutationResponse,
    QueryRequest,
    QueryResponse,
    SchemaResponse,
)
from ndc_client.operations import (
    CAPABILITIES_GET,
    EXPLAIN_POST,
    MUTATION_POST,
    QUERY_POST,
    SCHEMA_GET,
)


async def capabilities_get(
    configuration: Configuration,
    context: Optional[Context] = None,
) -> CapabilitiesResponse:
    """``GET capabilities``"""
    return await dispatch(configuration, CAPABILITIES_GET, context=context)


async def schema_get(
    configuration: Configuration,
    context: Optional[Context] = None,
) -> SchemaResponse:
    """``GET schema``"""
    return await dispatch(configuration, SCHEMA_GET, context=context)


async def query_post(
    configuration: Configuration,
    query_request: Union[QueryRequest, Dict[str, Any]],
    context: Optional[Context] = None,
) -> QueryResponse:
    """``POST query``"""
    return await dispatch(configuration, QUERY_POST, query_request, context=context)


async def mutation_post(
    configuration: Configuration,
    mutation_request: Union[MutationRequest, Dict[str, Any]],
    context: Optional[Context] = None,
) -> MutationResponse:
    """``POST mutation``"""
    return await dispatch(configuration, MUTATION_POST, mutation_request, context=context)


async def explain_post(
    configuration: Configuration,
    query_request: Union[QueryRequest, Dict[str, Any]],
    context: Optional[Context] = None,
) -> ExplainResponse:
    """``POST explain``"""
    return await dispatch(configuration, EXPLAIN_POST, query_request, context=context)
