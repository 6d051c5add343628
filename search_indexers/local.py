"""Local filesystem backend.

Writes each batch as a JSON array to ``<metrics_directory>/<metric_name>.json``.
Useful for offline runs where no cluster is available.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Sequence

from .base import Indexer, register
from .config import IndexerConfig, IndexingOpts
from .errors import IndexerError
from .hashing import encode_document

logger = logging.getLogger(__name__)


@register("local")
class LocalIndexer(Indexer):
    def __init__(self, config: IndexerConfig):
        super().__init__(config)
        if not config.metrics_directory:
            raise IndexerError("directory name not specified")
        self.directory = Path(config.metrics_directory)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise IndexerError(f"Error creating metrics directory: {exc}") from exc

    def index(
        self,
        documents: Sequence[Any],
        opts: Optional[IndexingOpts] = None,
    ) -> str:
        opts = opts or IndexingOpts()
        if not opts.metric_name:
            raise IndexerError("metric name not specified")

        body = encode_document(list(documents))
        path = self.directory / f"{opts.metric_name}.json"
        try:
            path.write_bytes(body)
        except OSError as exc:
            raise IndexerError(f"Error writing metrics file {path}: {exc}") from exc

        logger.debug("Wrote %d documents to %s", len(documents), path)
        return f"File {path} created with {len(documents)} documents"
