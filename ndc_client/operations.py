"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

The connector operations.

Every operation is described by one ``Operation`` value; the dispatcher
is written once against this description.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from ndc_client.models import (
    CapabilitiesResponse,
    ExplainResponse,
    MutationRequest,
    MutationResponse,
    QueryRequest,
    QueryResponse,
    SchemaResponse,
)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


@dataclass(frozen=True)
class Operation(Generic[ResponseT]):
    """A remote operation: HTTP method, path suffix and payload types."""
    name: str
    method: str
    path: str
    response_model: Type[ResponseT]
    request_model: Optional[Type[BaseModel]] = None

    @property
    def has_body(self) -> bool:
        return self.request_model is not None


CAPABILITIES_GET: Operation[CapabilitiesResponse] = Operation(
    name="capabilities_get",
    method="GET",
    path="capabilities",
    response_model=CapabilitiesResponse,
)

SCHEMA_GET: Operation[SchemaResponse] = Operation(
    name="schema_get",
    method="GET",
    path="schema",
    response_model=SchemaResponse,
)

QUERY_POST: Operation[QueryResponse] = Operation(
    name="query_post",
    method="POST",
    path="query",
    response_model=QueryResponse,
    request_model=QueryRequest,
)

MUTATION_POST: Operation[MutationResponse] = Operation(
    name="mutation_post",
    method="POST",
    path="mutation",
    response_model=MutationResponse,
    request_model=MutationRequest,
)

EXPLAIN_POST: Operation[ExplainResponse] = Operation(
    name="explain_post",
    method="POST",
    path="explain",
    response_model=ExplainResponse,
    request_model=QueryRequest,
)

OPERATIONS: Tuple[Operation, ...] = (
    CAPABILITIES_GET,
    SCHEMA_GET,
    QUERY_POST,
    MUTATION_POST,
    EXPLAIN_POST,
)
