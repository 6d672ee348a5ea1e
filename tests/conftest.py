"""
Pytest configuration and shared fixtures for NDC client tests.
"""

import logging
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from ndc_client.adapters.mock import MockAdapter
from ndc_client.configuration import Configuration


@pytest.fixture
def base_url() -> str:
    return "http://connector.test/ndc"


@pytest.fixture
def capabilities_body() -> dict:
    return {
        "version": "0.1.6",
        "capabilities": {"query": {"aggregates": {}, "variables": {}}, "mutation": {}},
    }


@pytest.fixture
def query_request_body() -> dict:
    return {
        "collection": "articles",
        "query": {
            "fields": {"id": {"type": "column", "column": "id"}},
            "limit": 10,
        },
        "arguments": {},
        "collection_relationships": {},
    }


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer(span_exporter) -> trace.Tracer:
    """Tracer from a private provider so tests never touch the global one."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider.get_tracer("ndc_client.tests")


@pytest.fixture
def propagator() -> TraceContextTextMapPropagator:
    return TraceContextTextMapPropagator()


@pytest.fixture
def parent_span(tracer):
    """An open span standing in for the caller's request span."""
    span = tracer.start_span("engine_request")
    yield span
    span.end()


@pytest.fixture
def make_configuration(base_url, tracer, propagator):
    """Build a Configuration around a MockAdapter."""

    def _make(adapter=None, **overrides) -> Configuration:
        options = {
            "base_path": base_url,
            "adapter": adapter or MockAdapter(),
            "tracer": tracer,
            "propagator": propagator,
        }
        options.update(overrides)
        return Configuration(**options)

    return _make


@pytest.fixture(autouse=True)
def reset_root_handlers():
    """Drop handlers installed by setup_logging so streams closed by a test are not reused."""
    yield
    logging.getLogger().handlers.clear()
