"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Transport adapters.
"""

from ndc_client.adapters.base import BaseAdapter, ConnectorRequest, ConnectorResponse
from ndc_client.adapters.http import HttpAdapter
from ndc_client.adapters.mock import MockAdapter

__all__ = [
    "BaseAdapter",
    "ConnectorRequest",
    "ConnectorResponse",
    "HttpAdapter",
    "MockAdapter",
]
