"""Client factory for Elasticsearch / OpenSearch connections."""

from __future__ import annotations

import logging
import os
from typing import Any, Sequence

from .errors import IndexerError

logger = logging.getLogger(__name__)

DEFAULT_SERVER = "http://localhost:9200"


def resolve_servers(servers: Sequence[str], env_var: str) -> list[str]:
    """Return *servers*, or the URL from *env_var* when none are given."""
    if servers:
        return list(servers)
    return [os.getenv(env_var) or DEFAULT_SERVER]


def create_client(
    client_cls: type[Any],
    servers: Sequence[str],
    label: str,
    **kwargs: Any,
) -> Any:
    """Create a search-engine client.

    Args:
        client_cls: ``Elasticsearch`` or ``OpenSearch``.
        servers: Cluster URLs.
        label: Backend name used in error messages.
        **kwargs: Passed through to the client constructor.

    Raises:
        IndexerError: The client rejected its configuration.
    """
    logger.debug("Creating %s client for %s", label, ", ".join(servers))
    try:
        return client_cls(hosts=list(servers), **kwargs)
    except (TypeError, ValueError) as exc:
        raise IndexerError(f"error creating the {label} client: {exc}") from exc
