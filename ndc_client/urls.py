"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Endpoint URL construction.

Operation paths are resolved relative to the configured base URL, which is
treated as a directory whether or not it ends in a slash:

    append_path("http://host/ndc", "capabilities")  -> "http://host/ndc/capabilities"
    append_path("http://host/ndc/", "capabilities") -> "http://host/ndc/capabilities"
"""

from urllib.parse import SplitResult, urljoin, urlsplit, urlunsplit

from ndc_client.exceptions import URLCannotBeABaseError, URLJoinError


def _split_base(base_url: str) -> SplitResult:
    try:
        parts = urlsplit(base_url)
        parts.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise URLJoinError(base_url, "", str(e)) from e

    if not parts.scheme:
        raise URLCannotBeABaseError(base_url)
    # Opaque URLs (mailto:, data:, urn:) have no path segments to extend
    if not parts.netloc and not parts.path.startswith("/"):
        raise URLCannotBeABaseError(base_url)
    return parts


def append_path(base_url: str, path: str) -> str:
    """
    Resolve ``path`` against ``base_url`` as if the base ended in ``/``.

    The query string and fragment of the base URL are not carried over.

    Args:
        base_url: Absolute, hierarchical base URL of the connector
        path: Relative path of the operation (e.g. ``"capabilities"``)

    Returns:
        Absolute URL of the operation endpoint

    Raises:
        URLCannotBeABaseError: If the base URL is relative or opaque
        URLJoinError: If the base or the joined URL cannot be parsed
    """
    base = _split_base(base_url)

    base_path = base.path or "/"
    if not base_path.endswith("/"):
        base_path += "/"

    try:
        resolved = urlsplit(urljoin(base_path, path))
        if resolved.scheme or resolved.netloc:
            # path was itself an absolute URL
            result = urlunsplit(resolved)
        else:
            result = urlunsplit(
                (base.scheme, base.netloc, resolved.path, resolved.query, resolved.fragment)
            )
        urlsplit(result).port
    except ValueError as e:
        raise URLJoinError(base_url, path, str(e)) from e

    return result
