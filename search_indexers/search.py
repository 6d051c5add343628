"""Bulk indexing into an Elasticsearch or OpenSearch cluster.

Documents are deduplicated by the SHA-256 of their JSON encoding before
they reach the bulk helper, and the hash doubles as the document ``_id``.
Re-sending the same body therefore overwrites instead of duplicating.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from types import ModuleType
from typing import Any, Iterator, Optional, Sequence

from .base import Indexer
from .client import create_client, resolve_servers
from .config import IndexerConfig, IndexingOpts
from .errors import IndexerError
from .hashing import document_id, encode_document
from .index import ensure_index

logger = logging.getLogger(__name__)


def format_duration(seconds: float) -> str:
    """Format *seconds* truncated to milliseconds, e.g. ``250ms`` or ``1m2.5s``."""
    ms = int(seconds * 1000)
    if ms == 0:
        return "0s"
    if ms < 1000:
        return f"{ms}ms"

    hours, rem = divmod(ms, 3_600_000)
    minutes, rem = divmod(rem, 60_000)
    secs, millis = divmod(rem, 1000)
    text = f"{secs}.{millis:03d}".rstrip("0").rstrip(".") + "s"
    if hours or minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return text


class SearchEngineIndexer(Indexer):
    """Indexer writing to a search-engine cluster through ``parallel_bulk``.

    Subclasses bind the vendor library:

    - ``client_class``: client constructor
    - ``helpers``: module providing ``parallel_bulk``
    - ``label``: name used in log and error messages
    - ``url_env_var``: fallback server URL when none is configured
    - ``transport_errors``: errors meaning the cluster was unreachable
    - ``status_errors``: errors carrying an HTTP status from the cluster
    """

    client_class: Any = None
    helpers: ModuleType
    label: str = ""
    url_env_var: str = ""
    transport_errors: tuple[type[BaseException], ...] = ()
    status_errors: tuple[type[BaseException], ...] = ()

    def __init__(self, config: IndexerConfig):
        super().__init__(config)
        if not config.index:
            raise IndexerError("index name not specified")
        self.index_name = config.index.lower()

        servers = resolve_servers(config.servers, self.url_env_var)
        self.client = create_client(
            self.client_class,
            servers,
            self.label,
            **self.client_options(config),
        )
        self.check_health()
        ensure_index(
            self.client,
            self.index_name,
            self.label,
            errors=self.transport_errors + self.status_errors,
        )

    def client_options(self, config: IndexerConfig) -> dict[str, Any]:
        """Keyword arguments for the client constructor."""
        verify = not config.insecure_skip_verify
        return {"verify_certs": verify, "ssl_show_warn": verify}

    def check_health(self) -> dict:
        try:
            health = self.client.cluster.health()
        except self.transport_errors as exc:
            raise IndexerError(f"{self.label} health check failed: {exc}") from exc
        except self.status_errors as exc:
            status = getattr(exc, "status_code", None)
            raise IndexerError(
                f"unexpected {self.label} status code: {status}"
            ) from exc

        body = getattr(health, "body", health)
        logger.debug(
            "%s cluster %s is %s",
            self.label,
            body.get("cluster_name"),
            body.get("status"),
        )
        return body

    def _actions(self, documents: Sequence[Any], stats: Counter) -> list[dict]:
        """Encode documents into bulk actions, skipping repeated bodies."""
        actions = []
        seen: set[str] = set()
        for document in documents:
            body = encode_document(document)
            doc_id = document_id(body)
            if doc_id in seen:
                stats["redundantskipped"] += 1
                continue
            seen.add(doc_id)
            actions.append(
                {
                    "_op_type": "index",
                    "_index": self.index_name,
                    "_id": doc_id,
                    "_source": body.decode("utf-8"),
                }
            )
        return actions

    def _bulk(self, actions: list[dict]) -> Iterator[tuple[bool, dict]]:
        return self.helpers.parallel_bulk(
            self.client,
            actions,
            thread_count=self.config.thread_count,
            chunk_size=self.config.chunk_size,
            max_chunk_bytes=self.config.flush_bytes,
            raise_on_error=False,
        )

    def index(
        self,
        documents: Sequence[Any],
        opts: Optional[IndexingOpts] = None,
    ) -> str:
        """Bulk-index *documents* into the configured index.

        Identical documents within the call are sent once. Item-level
        failures are counted under ``failed``; transport failures raise.

        Returns:
            A summary such as
            ``Indexing finished in 1.2s: created=10 redundantskipped=2``.
        """
        if not documents:
            return f"Indexing skipped due to {len(documents)} docs"

        opts = opts or IndexingOpts()
        stats: Counter = Counter()
        actions = self._actions(documents, stats)
        skipped = stats.pop("redundantskipped", 0)

        start = time.monotonic()
        try:
            for ok, item in self._bulk(actions):
                _, info = next(iter(item.items()))
                if ok:
                    stats[info.get("result", "unknown")] += 1
                else:
                    stats["failed"] += 1
                    logger.warning(
                        "Failed to index document %s: %s",
                        info.get("_id"),
                        info.get("error"),
                    )
        except self.transport_errors + self.status_errors as exc:
            raise IndexerError(f"Unexpected {self.label} error: {exc}") from exc
        elapsed = time.monotonic() - start

        stat_string = "".join(f" {key}={stats[key]}" for key in sorted(stats))
        if skipped > 0:
            stat_string += f" redundantskipped={skipped}"

        summary = f"Indexing finished in {format_duration(elapsed)}:{stat_string}"
        logger.info(
            "%s index %s (metric=%s job=%s): %s",
            self.label,
            self.index_name,
            opts.metric_name,
            opts.job_name,
            summary,
        )
        return summary
