"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Per-client configuration shared by every connector call.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from opentelemetry import trace
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.trace import Tracer

from ndc_client._version import __version__
from ndc_client.adapters.base import BaseAdapter
from ndc_client.adapters.http import HttpAdapter
from ndc_client.config.settings import NdcClientConfig
from ndc_client.exceptions import InvalidConfigurationError

TRACER_NAME = "ndc_client"


def to_header_string(value: Any) -> str:
    """
    Render a configured header value as header text.

    Strings are sent verbatim; any other value is sent as compact JSON.
    """
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, separators=(",", ":"), sort_keys=True)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(
            f"header value {value!r} cannot be serialized: {e}"
        ) from e


@dataclass(frozen=True)
class Configuration:
    """Connection settings for one connector.

    Created once per client and read by every call; calls never modify it,
    so a single instance may serve concurrent calls.

    Args:
        base_path: Base URL of the connector (e.g. ``http://localhost:8080/ndc``)
        adapter: Transport used for the HTTP exchange
        user_agent: Optional ``User-Agent`` header value
        headers: Static headers sent on every call. Non-string values are
            serialized to JSON.
        propagator: Trace context propagator; defaults to the global one
        tracer: Tracer used for per-call spans; defaults to the global provider's
    """
    base_path: str
    adapter: BaseAdapter = field(default_factory=HttpAdapter)
    user_agent: Optional[str] = None
    headers: Mapping[str, Any] = field(default_factory=dict)
    propagator: Optional[TextMapPropagator] = None
    tracer: Optional[Tracer] = None

    def __post_init__(self) -> None:
        if not self.base_path:
            raise InvalidConfigurationError("base_path is required")

        rendered = {name: to_header_string(value) for name, value in self.headers.items()}
        if len({name.lower() for name in rendered}) != len(rendered):
            raise InvalidConfigurationError(
                "static headers contain duplicate names (names are case-insensitive)"
            )
        object.__setattr__(self, "headers", MappingProxyType(rendered))

    def get_tracer(self) -> Tracer:
        if self.tracer is not None:
            return self.tracer
        return trace.get_tracer(TRACER_NAME, __version__)

    @classmethod
    def from_settings(
        cls,
        settings: NdcClientConfig,
        adapter: Optional[BaseAdapter] = None,
    ) -> Configuration:
        """Build a configuration from loaded settings."""
        if adapter is None:
            adapter = HttpAdapter(
                timeout=settings.transport.timeout_seconds,
                connect_timeout=settings.transport.connect_timeout_seconds,
                max_connections=settings.transport.max_connections,
                verify_tls=settings.transport.verify_tls,
            )
        return cls(
            base_path=settings.connector.base_url,
            adapter=adapter,
            user_agent=settings.connector.user_agent,
            headers=dict(settings.connector.headers),
        )
