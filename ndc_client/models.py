"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Wire models for connector requests and responses.

Only the top level of each payload is typed. Nested protocol structures
(expressions, field selections, type definitions) are kept as JSON
mappings, and unknown keys are preserved so that responses from newer
connectors still decode.
"""

from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    SerializerFunctionWrapHandler,
    model_serializer,
)


class WireModel(BaseModel):
    """Base for all wire models: keeps unknown keys.

    Declared fields holding None are left out of the serialized form.
    Unknown keys are passed through as given, nulls included.
    """
    model_config = ConfigDict(extra="allow")

    @model_serializer(mode="wrap")
    def omit_null_fields(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        for name in type(self).model_fields:
            if name in data and data[name] is None:
                del data[name]
        return data


# ---------------------------------------------------------------------------
# Capabilities & schema
# ---------------------------------------------------------------------------

class CapabilitiesResponse(WireModel):
    """Response model for ``GET /capabilities``."""
    version: str = Field(..., description="Protocol version implemented by the connector")
    capabilities: Dict[str, Any] = Field(..., description="Supported feature flags")


class SchemaResponse(WireModel):
    """Response model for ``GET /schema``."""
    scalar_types: Dict[str, Any] = Field(..., description="Scalar type definitions by name")
    object_types: Dict[str, Any] = Field(..., description="Object type definitions by name")
    collections: List[Dict[str, Any]] = Field(..., description="Collection definitions")
    functions: List[Dict[str, Any]] = Field(..., description="Function definitions")
    procedures: List[Dict[str, Any]] = Field(..., description="Procedure definitions")


# ---------------------------------------------------------------------------
# Query & explain
# ---------------------------------------------------------------------------

class Query(WireModel):
    """The query portion of a query request."""
    aggregates: Optional[Dict[str, Any]] = None
    fields: Optional[Dict[str, Any]] = None
    limit: Optional[int] = Field(None, ge=0)
    offset: Optional[int] = Field(None, ge=0)
    order_by: Optional[Dict[str, Any]] = None
    predicate: Optional[Dict[str, Any]] = None


class QueryRequest(WireModel):
    """Request model for ``POST /query`` and ``POST /explain``."""
    collection: str = Field(..., description="Name of the collection to query")
    query: Query = Field(..., description="Fields, aggregates and filters")
    arguments: Dict[str, Any] = Field(default_factory=dict, description="Collection arguments")
    collection_relationships: Dict[str, Any] = Field(
        default_factory=dict, description="Relationships referenced by the query"
    )
    variables: Optional[List[Dict[str, Any]]] = Field(
        None, description="Variable sets; one row set is returned per entry"
    )


class RowSet(WireModel):
    """Rows and aggregates returned for one variable set."""
    aggregates: Optional[Dict[str, Any]] = None
    rows: Optional[List[Dict[str, Any]]] = None


class QueryResponse(RootModel[List[RowSet]]):
    """Response model for ``POST /query``: one row set per variable set."""

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> RowSet:
        return self.root[index]


class ExplainResponse(WireModel):
    """Response model for ``POST /explain``."""
    details: Dict[str, str] = Field(..., description="Connector-specific plan details")


# ---------------------------------------------------------------------------
# Mutation
# ---------------------------------------------------------------------------

class MutationOperation(WireModel):
    """A single operation inside a mutation request."""
    type: str = Field(..., description="Operation kind, e.g. ``procedure``")
    name: str = Field(..., description="Name of the procedure to invoke")
    arguments: Dict[str, Any] = Field(default_factory=dict)
    fields: Optional[Dict[str, Any]] = None


class MutationRequest(WireModel):
    """Request model for ``POST /mutation``."""
    operations: List[MutationOperation] = Field(..., description="Operations to run, in order")
    collection_relationships: Dict[str, Any] = Field(default_factory=dict)


class MutationOperationResults(WireModel):
    """Result of a single mutation operation."""
    affected_rows: int = Field(..., description="Number of rows the operation changed")
    returning: Optional[List[Dict[str, Any]]] = None


class MutationResponse(WireModel):
    """Response model for ``POST /mutation``."""
    operation_results: List[MutationOperationResults] = Field(
        ..., description="One result per requested operation"
    )


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ErrorResponse(WireModel):
    """Error envelope returned with 4xx/5xx statuses."""
    message: str = Field(..., description="Human-readable error message")
    details: Any = Field(None, description="Connector-specific error details")
