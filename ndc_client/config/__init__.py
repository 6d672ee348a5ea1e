"""
Configuration management for the NDC client.

Handles loading and validation of configuration files.
"""

from ndc_client.config.settings import (
    ConnectorConfig,
    LoggingConfig,
    NdcClientConfig,
    TransportConfig,
    get_default_config,
    get_default_config_path,
    load_config,
    validate_config,
)

__all__ = [
    "ConnectorConfig",
    "LoggingConfig",
    "NdcClientConfig",
    "TransportConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
    "validate_config",
]
