"""
Configuration management for the NDC client.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from ndc_client.exceptions import InvalidConfigurationError
from ndc_client.logging_config import get_logger

logger = get_logger(__name__)

CONFIG_PATH_ENV_VAR = "NDC_CLIENT_CONFIG"

_ENV_VAR_PATTERN = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} and ${ENV_VAR:default}. Unset variables without a
    default expand to an empty string.
    """
    if isinstance(value, str):
        def replace_env_var(match):
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(match.group(1), default_value)

        return _ENV_VAR_PATTERN.sub(replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class ConnectorConfig:
    """Connector endpoint configuration."""

    base_url: str = "http://localhost:8080"
    user_agent: Optional[str] = None
    headers: Dict[str, Any] = field(default_factory=dict)


@dataclass
class TransportConfig:
    """HTTP transport configuration."""

    timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 5.0
    max_connections: int = 100
    verify_tls: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    format: str = "text"  # "text" or "json"


@dataclass
class NdcClientConfig:
    """Top-level NDC client configuration."""

    connector: ConnectorConfig = field(default_factory=ConnectorConfig)
    transport: TransportConfig = field(default_factory=TransportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the configuration file path, honouring ``NDC_CLIENT_CONFIG``."""
    return os.environ.get(CONFIG_PATH_ENV_VAR) or os.path.expanduser(
        "~/.ndc-client/config.yaml"
    )


def get_default_config() -> NdcClientConfig:
    """Get default configuration."""
    return NdcClientConfig()


def load_config(config_path: Optional[str] = None) -> NdcClientConfig:
    """
    Load configuration from YAML file with validation.

    If the config file is not found or is empty, returns default configuration.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        NdcClientConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(config_path)

    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e

    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping at the top level"
        )

    config_data = _expand_env_vars(config_data)

    try:
        config = _build_config_from_dict(config_data)
        validate_config(config)
    except InvalidConfigurationError as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e

    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidConfigurationError(f"'{name}' section must be a mapping")
    return section


def _build_config_from_dict(config_data: Dict[str, Any]) -> NdcClientConfig:
    """
    Build NdcClientConfig from a parsed YAML dictionary.

    Raises:
        InvalidConfigurationError: If a section has unknown keys or bad types
    """
    connector_data = _section(config_data, "connector")
    transport_data = _section(config_data, "transport")
    logging_data = _section(config_data, "logging")

    try:
        connector = ConnectorConfig(**connector_data)
        transport = TransportConfig(**transport_data)
        logging_config = LoggingConfig(**logging_data)
    except TypeError as e:
        raise InvalidConfigurationError(str(e)) from e

    if connector.headers is None:
        connector.headers = {}
    if not isinstance(connector.headers, dict):
        raise InvalidConfigurationError("connector.headers must be a mapping")

    try:
        transport.timeout_seconds = float(transport.timeout_seconds)
        transport.connect_timeout_seconds = float(transport.connect_timeout_seconds)
        transport.max_connections = int(transport.max_connections)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(f"invalid transport setting: {e}") from e

    # ${VAR} expansion always produces strings
    if isinstance(transport.verify_tls, str):
        transport.verify_tls = transport.verify_tls.strip().lower() in ("1", "true", "yes", "on")

    return NdcClientConfig(
        connector=connector,
        transport=transport,
        logging=logging_config,
    )


def validate_config(config: NdcClientConfig) -> None:
    """
    Validate configuration values.

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if not config.connector.base_url:
        raise InvalidConfigurationError("connector.base_url cannot be empty")

    lowered = [name.lower() for name in config.connector.headers]
    if len(set(lowered)) != len(lowered):
        raise InvalidConfigurationError(
            "connector.headers contains duplicate header names (names are case-insensitive)"
        )

    if config.transport.timeout_seconds <= 0:
        raise InvalidConfigurationError(
            f"timeout_seconds must be positive, got {config.transport.timeout_seconds}"
        )
    if config.transport.connect_timeout_seconds <= 0:
        raise InvalidConfigurationError(
            f"connect_timeout_seconds must be positive, "
            f"got {config.transport.connect_timeout_seconds}"
        )
    if config.transport.max_connections < 1:
        raise InvalidConfigurationError(
            f"max_connections must be at least 1, got {config.transport.max_connections}"
        )

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )

    valid_formats = ["text", "json"]
    if config.logging.format not in valid_formats:
        raise InvalidConfigurationError(
            f"logging format must be one of {valid_formats}, got '{config.logging.format}'"
        )
