"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

CLI context for the NDC client.

Holds the loaded settings and the consoles commands print to.
"""

from typing import Optional

import click
from rich.console import Console

from ndc_client.client import ConnectorClient
from ndc_client.config.settings import NdcClientConfig


class CLIContext:
    """State shared by all commands of one CLI invocation."""

    def __init__(self) -> None:
        self.config: Optional[NdcClientConfig] = None
        self.config_path: Optional[str] = None
        self.verbose = False
        self.console = Console()
        self.err_console = Console(stderr=True)

    def make_client(self) -> ConnectorClient:
        """Create a connector client from the loaded settings."""
        if self.config is None:
            raise click.UsageError("configuration was not loaded")
        return ConnectorClient.from_settings(self.config)


pass_context = click.make_pass_decorator(CLIContext, ensure=True)
