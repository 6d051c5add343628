"""Indexer interface and backend registry."""

from __future__ import annotations

import abc
import logging
from typing import Any, Callable, Optional, Sequence

from .config import IndexerConfig, IndexingOpts
from .errors import IndexerError

logger = logging.getLogger(__name__)

INDEXERS: dict[str, type["Indexer"]] = {}


class Indexer(abc.ABC):
    """A destination for batches of JSON-serializable documents."""

    def __init__(self, config: IndexerConfig):
        self.config = config

    @abc.abstractmethod
    def index(
        self,
        documents: Sequence[Any],
        opts: Optional[IndexingOpts] = None,
    ) -> str:
        """Index *documents* and return a one-line summary."""


def register(name: str) -> Callable[[type[Indexer]], type[Indexer]]:
    """Class decorator adding an indexer backend under *name*."""

    def decorator(cls: type[Indexer]) -> type[Indexer]:
        INDEXERS[name] = cls
        return cls

    return decorator


def new_indexer(config: IndexerConfig) -> Indexer:
    """Create the indexer backend selected by ``config.type``."""
    try:
        cls = INDEXERS[config.type]
    except KeyError:
        raise IndexerError(f"Indexer not found: {config.type}") from None
    logger.debug("Creating %s indexer", config.type)
    return cls(config)
