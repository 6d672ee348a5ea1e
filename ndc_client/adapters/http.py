"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

HTTP transport adapter (default).
"""

from __future__ import annotations

import asyncio
import time
from typing import Optional

import httpx

from ndc_client.adapters.base import BaseAdapter, ConnectorRequest, ConnectorResponse
from ndc_client.exceptions import TransportError
from ndc_client.logging_config import get_logger

logger = get_logger(__name__)


class HttpAdapter(BaseAdapter):
    """Default HTTP transport using ``httpx.AsyncClient``.

    Connection pooling, TLS and timeouts are left to httpx. A client passed
    in by the caller is shared, not owned: :meth:`aclose` leaves it open.

    Args:
        client: Optional pre-built ``httpx.AsyncClient`` to send through.
        timeout: Total request timeout in seconds.
        connect_timeout: Connection timeout in seconds.
        max_connections: Maximum number of pooled connections.
        verify_tls: Whether to verify TLS certificates.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
        connect_timeout: float = 5.0,
        max_connections: int = 100,
        verify_tls: bool = True,
    ) -> None:
        self._client = client
        self._owns_client = client is None
        self._timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self._limits = httpx.Limits(max_connections=max_connections)
        self._verify_tls = verify_tls
        self._closed = False

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=self._limits,
                verify=self._verify_tls,
            )
            self._closed = False
        return self._client

    async def send(self, request: ConnectorRequest) -> ConnectorResponse:
        client = self._ensure_client()
        start = time.monotonic()

        try:
            http_request = client.build_request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                json=request.body,
            )
            resp = await client.send(http_request)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(
                "connector_transport_failure",
                method=request.method,
                url=request.url,
                error_type=type(e).__name__,
            )
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e
        except asyncio.CancelledError as e:
            raise TransportError(f"{request.method} {request.url} was cancelled") from e

        elapsed = (time.monotonic() - start) * 1000

        return ConnectorResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            content=resp.content,
            elapsed_ms=round(elapsed, 2),
        )

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
        self._closed = True

    @property
    def is_connected(self) -> bool:
        return not self._closed
