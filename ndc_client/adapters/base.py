"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Transport adapter base class and the request/response it exchanges.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ConnectorRequest:
    """Outbound request to a connector endpoint."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Any] = None


@dataclass
class ConnectorResponse:
    """Raw response from a connector endpoint; the body is not decoded."""
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""
    elapsed_ms: float = 0.0


class BaseAdapter(ABC):
    """Abstract base for all transport adapters.

    ``send`` performs exactly one exchange. Failures that prevent a
    response from being obtained must be raised as
    :class:`~ndc_client.exceptions.TransportError`.
    """

    @abstractmethod
    async def send(self, request: ConnectorRequest) -> ConnectorResponse:
        """Send a request and return the response."""
        ...

    @abstractmethod
    async def aclose(self) -> None:
        """Release adapter resources."""
        ...

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Whether the adapter is in a usable state."""
        ...
