"""Index management operations."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .errors import IndexerError

logger = logging.getLogger(__name__)


def index_exists(client: Any, name: str) -> bool:
    """Check whether an index exists."""
    return bool(client.indices.exists(index=name))


def create_index(
    client: Any,
    name: str,
    mappings: Optional[dict[str, Any]] = None,
    settings: Optional[dict[str, Any]] = None,
) -> Any:
    """Create an index, with cluster defaults unless mappings/settings are given."""
    body: dict[str, Any] = {}
    if settings:
        body["settings"] = settings
    if mappings:
        body["mappings"] = mappings

    if body:
        return client.indices.create(index=name, body=body)
    return client.indices.create(index=name)


def ensure_index(
    client: Any,
    name: str,
    label: str,
    errors: tuple[type[BaseException], ...] = (Exception,),
) -> bool:
    """Create *name* if it is missing.

    Returns:
        True if the index was created, False if it already existed.

    Raises:
        IndexerError: The cluster refused to create the index.
    """
    try:
        if index_exists(client, name):
            logger.debug("Index already exists: %s", name)
            return False
        create_index(client, name)
    except errors as exc:
        raise IndexerError(f"error creating index {name} on {label}: {exc}") from exc

    logger.info("Created index: %s", name)
    return True
