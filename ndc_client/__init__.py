"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

NDC Client - HTTP client for data connector services.

Quick start::

    from ndc_client import ConnectorClient, Configuration
    async with ConnectorClient(Configuration(base_path="http://localhost:8080")) as client:
        schema = await client.schema()
"""

from ndc_client._version import __version__
from ndc_client.api import (
    capabilities_get,
    explain_post,
    mutation_post,
    query_post,
    schema_get,
)
from ndc_client.client import ConnectorClient, ConnectorClientBuilder
from ndc_client.configuration import Configuration
from ndc_client.exceptions import (
    BodyDecodeError,
    ConnectorError,
    EndpointResolutionError,
    InvalidRequestError,
    NdcClientError,
    TransportError,
)

__all__ = [
    "__version__",
    # client
    "ConnectorClient",
    "ConnectorClientBuilder",
    "Configuration",
    # operations
    "capabilities_get",
    "schema_get",
    "query_post",
    "mutation_post",
    "explain_post",
    # errors
    "NdcClientError",
    "EndpointResolutionError",
    "InvalidRequestError",
    "TransportError",
    "BodyDecodeError",
    "ConnectorError",
]
