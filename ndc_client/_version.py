"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Version information for the NDC client.

The version string lives in the VERSION file next to the package.
"""

from pathlib import Path


def get_version() -> str:
    """Return the version from the VERSION file, or ``"unknown"``."""
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "unknown"


__version__ = get_version()
