"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Connector Client & Builder.

Provides two entry points:
    - ``ConnectorClient(Configuration(base_path=...))`` for direct use
    - ``ConnectorClientBuilder().set_base_url(...).add_header(...).build()``
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from opentelemetry.context import Context
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.trace import Tracer

from ndc_client import api
from ndc_client.adapters.base import BaseAdapter
from ndc_client.adapters.http import HttpAdapter
from ndc_client.config.settings import NdcClientConfig, load_config
from ndc_client.configuration import Configuration
from ndc_client.exceptions import InvalidConfigurationError
from ndc_client.logging_config import get_logger
from ndc_client.models import (
    CapabilitiesResponse,
    ExplainResponse,
    MutationRequest,
    MutationResponse,
    QueryRequest,
    QueryResponse,
    SchemaResponse,
)

logger = get_logger(__name__)


class ConnectorClient:
    """Client for a single connector.

    Quick start::

        async with ConnectorClient(Configuration(base_path="http://localhost:8080")) as client:
            capabilities = await client.capabilities()

    Traced::

        with tracer.start_as_current_span("plan"):
            rows = await client.query(request, context=otel_context.get_current())

    Args:
        configuration: Connection settings shared by every call.
    """

    def __init__(self, configuration: Configuration) -> None:
        self._configuration = configuration
        logger.info("ConnectorClient initialized", base_path=configuration.base_path)

    @classmethod
    def from_settings(cls, settings: NdcClientConfig) -> ConnectorClient:
        """Create a client from loaded settings."""
        return cls(Configuration.from_settings(settings))

    @classmethod
    def from_config_file(cls, config_path: Optional[str] = None) -> ConnectorClient:
        """Create a client from a YAML configuration file."""
        return cls.from_settings(load_config(config_path))

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    # -- Operations ----------------------------------------------------------

    async def capabilities(self, context: Optional[Context] = None) -> CapabilitiesResponse:
        """Fetch the connector's capabilities."""
        return await api.capabilities_get(self._configuration, context=context)

    async def schema(self, context: Optional[Context] = None) -> SchemaResponse:
        """Fetch the connector's schema."""
        return await api.schema_get(self._configuration, context=context)

    async def query(
        self,
        request: Union[QueryRequest, Dict[str, Any]],
        context: Optional[Context] = None,
    ) -> QueryResponse:
        """Run a query."""
        return await api.query_post(self._configuration, request, context=context)

    async def explain(
        self,
        request: Union[QueryRequest, Dict[str, Any]],
        context: Optional[Context] = None,
    ) -> ExplainResponse:
        """Explain a query without running it."""
        return await api.explain_post(self._configuration, request, context=context)

    async def mutation(
        self,
        request: Union[MutationRequest, Dict[str, Any]],
        context: Optional[Context] = None,
    ) -> MutationResponse:
        """Run a mutation."""
        return await api.mutation_post(self._configuration, request, context=context)

    # -- Lifecycle -----------------------------------------------------------

    async def aclose(self) -> None:
        """Release transport resources."""
        await self._configuration.adapter.aclose()
        logger.info("ConnectorClient closed")

    async def __aenter__(self) -> ConnectorClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


class ConnectorClientBuilder:
    """Fluent builder for ConnectorClient.

    Example::

        client = (
            ConnectorClientBuilder()
            .set_base_url("https://connector.internal/ndc")
            .set_user_agent("engine/2.1")
            .add_header("x-hasura-role", "admin")
            .set_timeout(10)
            .build()
        )
    """

    def __init__(self) -> None:
        self._base_url: Optional[str] = None
        self._user_agent: Optional[str] = None
        self._headers: Dict[str, Any] = {}
        self._adapter: Optional[BaseAdapter] = None
        self._timeout: float = 30.0
        self._propagator: Optional[TextMapPropagator] = None
        self._tracer: Optional[Tracer] = None

    def set_base_url(self, url: str) -> ConnectorClientBuilder:
        """Set the connector base URL."""
        self._base_url = url
        return self

    def set_user_agent(self, user_agent: str) -> ConnectorClientBuilder:
        """Set the ``User-Agent`` header value."""
        self._user_agent = user_agent
        return self

    def add_header(self, name: str, value: Any) -> ConnectorClientBuilder:
        """Add a static header; non-string values are sent as JSON."""
        self._headers[name] = value
        return self

    def set_transport(self, adapter: BaseAdapter) -> ConnectorClientBuilder:
        """Override the default HTTP adapter."""
        self._adapter = adapter
        return self

    def set_timeout(self, seconds: float) -> ConnectorClientBuilder:
        """Set the request timeout of the default HTTP adapter."""
        self._timeout = seconds
        return self

    def set_propagator(self, propagator: TextMapPropagator) -> ConnectorClientBuilder:
        self._propagator = propagator
        return self

    def set_tracer(self, tracer: Tracer) -> ConnectorClientBuilder:
        self._tracer = tracer
        return self

    def build(self) -> ConnectorClient:
        """Construct the ConnectorClient.

        Raises:
            InvalidConfigurationError: If no base URL was set or settings are invalid.
        """
        if not self._base_url:
            raise InvalidConfigurationError(
                "ConnectorClientBuilder.build() requires set_base_url()."
            )
        if self._timeout <= 0:
            raise InvalidConfigurationError(
                f"timeout must be positive, got {self._timeout}"
            )

        configuration = Configuration(
            base_path=self._base_url,
            adapter=self._adapter or HttpAdapter(timeout=self._timeout),
            user_agent=self._user_agent,
            headers=dict(self._headers),
            propagator=self._propagator,
            tracer=self._tracer,
        )
        return ConnectorClient(configuration)
