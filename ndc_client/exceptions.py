"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Exception hierarchy for the NDC client.

All custom exceptions inherit from NdcClientError. A call into the client
either returns a typed response or raises exactly one of these.
"""

from typing import Any, Optional


class NdcClientError(Exception):
    """Base exception for all NDC client errors."""
    pass


# Endpoint Resolution Errors
class EndpointResolutionError(NdcClientError):
    """Raised when the operation URL cannot be built from the base URL."""
    pass


class URLCannotBeABaseError(EndpointResolutionError):
    """Raised when the base URL is not a hierarchical URL."""

    def __init__(self, base_url: str):
        self.base_url = base_url
        super().__init__(f"base URL '{base_url}' is not a valid hierarchical URL")


class URLJoinError(EndpointResolutionError):
    """Raised when joining the base URL and the operation path fails."""

    def __init__(self, base_url: str, path: str, reason: str):
        self.base_url = base_url
        self.path = path
        super().__init__(
            f"failed to resolve '{path}' against '{base_url}': {reason}"
        )


# Request Errors
class InvalidRequestError(NdcClientError, ValueError):
    """Raised when a request payload does not fit the operation; nothing is sent."""
    pass


# Transport Errors
class TransportError(NdcClientError):
    """Raised when the HTTP exchange fails before a response is obtained."""
    pass


# Body Decode Errors
class BodyDecodeError(NdcClientError):
    """Base exception for response bodies that cannot be decoded."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ResponseNotJSONError(BodyDecodeError):
    """Raised when the response body is not valid JSON."""
    pass


class SuccessSchemaMismatchError(BodyDecodeError):
    """Raised when a success body does not match the expected schema."""
    pass


class ErrorSchemaMismatchError(BodyDecodeError):
    """Raised when an error body does not match the error envelope schema."""
    pass


# Protocol Errors
class ConnectorError(NdcClientError):
    """
    Raised when the connector answers with a 4xx/5xx status and a
    well-formed error envelope.

    Attributes:
        status_code: HTTP status returned by the connector
        error_response: Decoded error envelope
    """

    def __init__(self, status_code: int, error_response: Any):
        self.status_code = status_code
        self.error_response = error_response
        super().__init__(
            f"connector returned status {status_code}: "
            f"{getattr(error_response, 'message', error_response)}"
        )


# Configuration Errors
class ConfigurationError(NdcClientError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass
