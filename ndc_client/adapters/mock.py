"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Mock transport adapter for local testing.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Tuple, Union

from ndc_client.adapters.base import BaseAdapter, ConnectorRequest, ConnectorResponse

MockResult = Union[ConnectorResponse, BaseException]


class MockAdapter(BaseAdapter):
    """In-memory mock adapter for unit tests.

    Args:
        responses: Mapping from ``(method, url)`` tuples to either a
            ``ConnectorResponse`` or an exception to raise from ``send``.

    Example::

        adapter = MockAdapter({
            ("GET", "http://localhost:8080/capabilities"): MockAdapter.json_response(
                200, {"version": "0.1.0", "capabilities": {}}
            ),
        })
    """

    def __init__(
        self,
        responses: Optional[Dict[Tuple[str, str], MockResult]] = None,
    ) -> None:
        self._responses: Dict[Tuple[str, str], MockResult] = responses or {}
        self._sent: list[ConnectorRequest] = []
        self._closed = False

    @staticmethod
    def json_response(status_code: int, body: Any) -> ConnectorResponse:
        """Build a response whose content is ``body`` encoded as JSON."""
        return ConnectorResponse(
            status_code=status_code,
            headers={"content-type": "application/json"},
            content=json.dumps(body).encode("utf-8"),
        )

    async def send(self, request: ConnectorRequest) -> ConnectorResponse:
        self._sent.append(request)
        result = self._responses.get((request.method.upper(), request.url))
        if result is None:
            return self.json_response(404, {"message": "not mocked", "details": None})
        if isinstance(result, BaseException):
            raise result
        return result

    async def aclose(self) -> None:
        self._closed = True

    @property
    def is_connected(self) -> bool:
        return not self._closed

    @property
    def sent_requests(self) -> list[ConnectorRequest]:
        """All requests that have been sent through this adapter."""
        return list(self._sent)

    @property
    def call_count(self) -> int:
        return len(self._sent)
